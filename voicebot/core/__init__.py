"""Core orchestration package.

Architectural role:
    Sits between the HTTP/CLI adapters and the NLU components, turning one
    utterance into a structured result.

Composition:
    - `engine`: Pipeline construction and per-utterance processing.
    - `types`: Intent vocabulary, entity mapping and domain records.
    - `errors`: Boot-time failures that abort startup.
"""
