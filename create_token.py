from spirit_emeraude_api.app.core.security import ADMIN_ROLE, create_access_token

# Admin token for the console; lifetime 365 days (seconds)
token = create_access_token({"sub": "admin", "role": ADMIN_ROLE}, expires_delta=365 * 24 * 60 * 60)
print(token)
