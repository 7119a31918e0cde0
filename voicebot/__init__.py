"""Hotel voice bot package.

Architectural role:
    Groups the natural-language-understanding core (`nlp`, `responses`, `core`)
    and the collaborators that surround it (`store`, `analytics`, `api`).

Package import itself is side-effect free. `voicebot.config` reads `.env` once
when first imported.
"""

__version__ = "1.0.0"
