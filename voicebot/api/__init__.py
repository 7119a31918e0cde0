"""Voice bot API adapter package.

Architectural role:
- Defines the external interaction boundary for HTTP and CLI interfaces.
- Performs transport-level validation and response shaping.
- Delegates intent, entity and reply work to the core pipeline.
"""
