import os
from motor.motor_asyncio import AsyncIOMotorClient
from config import ROOT_DIR
from dotenv import load_dotenv

load_dotenv(ROOT_DIR / '.env')

# Platform admin accounts, with their RBAC roles embedded, live in db.platform_admins
client = AsyncIOMotorClient(os.environ.get('MONGO_URL', 'mongodb://localhost:27017'))
db = client[os.environ.get('DB_NAME', 'platform_admin')]
