import os
from functools import lru_cache

from dotenv import load_dotenv, find_dotenv

# Values already present in the process environment win over the .env file
_env_path = find_dotenv(usecwd=True)
if _env_path:
    load_dotenv(_env_path, override=False)


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "sanor-secret-key")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    # Default to 7 days so shoppers stay logged in for a week
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(7 * 24 * 60)))
    # Razorpay credentials; checkout refuses to start a payment without both
    RAZORPAY_KEY_ID: str = os.getenv("RAZORPAY_KEY_ID")
    RAZORPAY_KEY_SECRET: str = os.getenv("RAZORPAY_KEY_SECRET")
    PAYMENT_CURRENCY: str = os.getenv("PAYMENT_CURRENCY", "INR")
    # Display-only tax applied to cart totals (orders are charged the subtotal)
    TAX_RATE: str = os.getenv("TAX_RATE", "0.18")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


@lru_cache
def get_settings():
    return Settings()
