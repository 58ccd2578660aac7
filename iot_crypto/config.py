import os
from dotenv import load_dotenv
load_dotenv()

LOG_LEVEL = os.getenv("IOT_CRYPTO_LOG_LEVEL", "WARNING").upper()
KEYGEN_MAX_ATTEMPTS = int(os.getenv("IOT_CRYPTO_KEYGEN_MAX_ATTEMPTS", "64"))
DEMO_MESSAGE = os.getenv("IOT_CRYPTO_DEMO_MESSAGE", "Hello, World!!!!!!!!")
