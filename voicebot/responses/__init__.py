"""Reply synthesis for resolved intents."""
