"""
Squash utility package.

Provides:
- Ollama HTTP client (generate, chat, model management, embeddings)
- Discord-style webhook sender
- Byte / binary byte unit conversion
- Calculator, number formatting, UUID and random string helpers
"""
