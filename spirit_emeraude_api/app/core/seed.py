"""
Demo content loaded into the store at startup.

The texts are the storefront's launch content; images point at the
static assets bundled with the storefront.
"""

from ..schemas.formation import FormationCreate
from ..schemas.gallery import GalleryCategory, GalleryPhotoCreate
from ..schemas.impact import ImpactCreate
from ..schemas.product import ProductCategory, ProductCreate

ASSETS = "/assets/generated_images"

SAMPLE_PRODUCTS = [
    ProductCreate(
        name="Sac Élégance Pagne",
        category=ProductCategory.SAC,
        price=45000,
        description="Sac à main en pagne wax traditionnel avec finitions en cuir véritable. Design unique et élégant.",
        images=[f"{ASSETS}/luxury_pagne_handbag_hero.png"],
        is_featured=True,
        in_stock=True,
        slug="sac-elegance-pagne",
    ),
    ProductCreate(
        name="Pochette Soleil d'Afrique",
        category=ProductCategory.TROUSSE,
        price=18000,
        description="Pochette compacte aux motifs solaires, parfaite pour vos essentiels du quotidien.",
        images=[f"{ASSETS}/luxury_pagne_clutch_bag.png"],
        is_featured=False,
        in_stock=True,
        slug="pochette-soleil-afrique",
    ),
    ProductCreate(
        name="Grand Cabas Tradition",
        category=ProductCategory.SAC,
        price=55000,
        description="Grand sac cabas spacieux, idéal pour le travail ou les courses. Intérieur doublé.",
        images=[f"{ASSETS}/luxury_pagne_tote_bag.png"],
        is_featured=True,
        in_stock=True,
        slug="grand-cabas-tradition",
    ),
    ProductCreate(
        name="Sandales Harmonie",
        category=ProductCategory.SANDALE,
        price=28000,
        description="Sandales artisanales avec lanières en pagne et semelle en cuir naturel.",
        images=[f"{ASSETS}/luxury_pagne_sandals_product.png"],
        is_featured=True,
        in_stock=True,
        slug="sandales-harmonie",
    ),
    ProductCreate(
        name="Sandales Terre Rouge",
        category=ProductCategory.SANDALE,
        price=32000,
        description="Sandales plates confortables aux couleurs chaudes de la terre africaine.",
        images=[f"{ASSETS}/luxury_pagne_sandals_product.png"],
        is_featured=False,
        in_stock=True,
        slug="sandales-terre-rouge",
    ),
    ProductCreate(
        name="Accessoires Collection",
        category=ProductCategory.ACCESSOIRE,
        price=8000,
        description="Ensemble d'accessoires en pagne : bracelet, bandeau et pochette assortis.",
        images=[f"{ASSETS}/pagne_accessories_collection.png"],
        is_featured=False,
        in_stock=True,
        slug="accessoires-collection",
    ),
    ProductCreate(
        name="Bandeau Grâce",
        category=ProductCategory.ACCESSOIRE,
        price=12000,
        description="Bandeau élégant en pagne wax, parfait pour sublimer votre coiffure.",
        images=[f"{ASSETS}/pagne_accessories_collection.png"],
        is_featured=False,
        in_stock=True,
        slug="bandeau-grace",
    ),
    ProductCreate(
        name="Mini Sac Bijou",
        category=ProductCategory.SAC,
        price=25000,
        description="Petit sac de soirée raffiné avec chaîne dorée. Édition limitée.",
        images=[f"{ASSETS}/luxury_pagne_clutch_bag.png"],
        is_featured=True,
        in_stock=False,
        slug="mini-sac-bijou",
    ),
]

SAMPLE_FORMATIONS = [
    FormationCreate(
        name="Initiation à la Couture Pagne",
        description=(
            "Apprenez les bases de la couture et créez votre première pochette en pagne. "
            "Formation idéale pour débutants souhaitant découvrir l'art de la création artisanale."
        ),
        duration="2 jours (12h)",
        price=35000,
        materials="Tissu pagne, fil, aiguilles fournis",
        image=f"{ASSETS}/artisan_training_workshop.png",
        next_session="2025-01-15",
    ),
    FormationCreate(
        name="Création de Sacs Artisanaux",
        description=(
            "Maîtrisez les techniques de confection de sacs en pagne. De la découpe à "
            "l'assemblage final, devenez autonome dans la création de pièces uniques."
        ),
        duration="5 jours (35h)",
        price=85000,
        materials="Tout le matériel inclus",
        image=f"{ASSETS}/craft_materials_display.png",
        next_session="2025-01-22",
    ),
    FormationCreate(
        name="Perfectionnement & Entrepreneuriat",
        description=(
            "Formation avancée combinant techniques de création professionnelles et bases "
            "de gestion d'entreprise. Lancez votre propre activité artisanale."
        ),
        duration="10 jours (70h)",
        price=150000,
        materials="Matériel professionnel + Kit de démarrage",
        image=f"{ASSETS}/community_impact_workshop.png",
        next_session="2025-02-03",
    ),
]

SAMPLE_IMPACTS = [
    ImpactCreate(
        name="Atelier Créatif à l'Orphelinat Sainte Thérèse",
        description=(
            "En partenariat avec l'Orphelinat Sainte Thérèse de Brazzaville, nous avons organisé "
            "une série d'ateliers créatifs permettant aux enfants de découvrir l'art du tissage "
            "et de la couture."
        ),
        images=[f"{ASSETS}/community_impact_workshop.png", f"{ASSETS}/artisan_training_workshop.png"],
        date="2024-11-15",
        location="Brazzaville",
    ),
    ImpactCreate(
        name="Formation Femmes Autonomes - Promotion 2024",
        description=(
            "Vingt femmes ont suivi notre programme intensif de formation à la création "
            "artisanale. À l'issue de cette formation, 15 d'entre elles ont lancé leur propre activité."
        ),
        images=[f"{ASSETS}/artisan_training_workshop.png"],
        date="2024-09-20",
        location="Brazzaville",
    ),
    ImpactCreate(
        name="Don de Fournitures Scolaires",
        description=(
            "Une partie des bénéfices de notre collection Rentrée 2024 a été reversée sous forme "
            "de fournitures scolaires à plus de 80 enfants défavorisés."
        ),
        images=[f"{ASSETS}/community_impact_workshop.png"],
        date="2024-09-05",
        location="Brazzaville et environs",
    ),
]

_GALLERY = [
    ("Sac de luxe en pagne", GalleryCategory.CREATION, "luxury_pagne_handbag_hero.png"),
    ("Atelier de formation", GalleryCategory.ATELIER, "artisan_training_workshop.png"),
    ("Sandales artisanales", GalleryCategory.CREATION, "luxury_pagne_sandals_product.png"),
    ("Impact communautaire", GalleryCategory.HUMANITAIRE, "community_impact_workshop.png"),
    ("Pochette élégante", GalleryCategory.CREATION, "luxury_pagne_clutch_bag.png"),
    ("Matériaux artisanaux", GalleryCategory.ATELIER, "craft_materials_display.png"),
    ("Grand cabas", GalleryCategory.CREATION, "luxury_pagne_tote_bag.png"),
    ("Collection accessoires", GalleryCategory.CREATION, "pagne_accessories_collection.png"),
    ("Fondatrice Emeraude", GalleryCategory.HUMANITAIRE, "african_founder_portrait.png"),
    ("Détails finitions", GalleryCategory.CREATION, "luxury_pagne_handbag_hero.png"),
    ("Apprentissage couture", GalleryCategory.ATELIER, "artisan_training_workshop.png"),
    ("Action sociale", GalleryCategory.HUMANITAIRE, "community_impact_workshop.png"),
]

SAMPLE_GALLERY_PHOTOS = [
    GalleryPhotoCreate(name=name, category=category, image_url=f"{ASSETS}/{filename}")
    for name, category, filename in _GALLERY
]
