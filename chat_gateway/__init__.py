"""AI chat gateway: Supabase-authenticated proxy to OpenAI Chat Completions."""

__version__ = "0.1.0"
