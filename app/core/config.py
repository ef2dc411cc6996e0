import os
from dotenv import load_dotenv

load_dotenv()

SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_KEY = os.getenv("SUPABASE_KEY")

# Fireworks credentials and generation settings
API_KEY = os.getenv("API_KEY")
LLM_MODEL = os.getenv(
    "LLM_MODEL", "accounts/fireworks/models/llama-v3p1-8b-instruct"
)
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.7"))
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "1500"))
LLM_CHAT_MAX_TOKENS = int(os.getenv("LLM_CHAT_MAX_TOKENS", "1000"))
LLM_TIMEOUT_SECONDS = int(os.getenv("LLM_TIMEOUT_SECONDS", "30"))

# How many transactions are sent verbatim to the model
RECENT_TRANSACTION_SAMPLE = int(os.getenv("RECENT_TRANSACTION_SAMPLE", "20"))

VERIFICATION_TTL_SECONDS = int(os.getenv("VERIFICATION_TTL_SECONDS", "600"))
VERIFICATION_SWEEP_SECONDS = int(os.getenv("VERIFICATION_SWEEP_SECONDS", "300"))
