"""
Shared service utilities.

Simple modules with no domain knowledge. No magic.

- http.py       - requests session with retry, URL-or-path fetch helpers
- tabular.py    - CSV text to row dicts
- assistant.py  - chat-completion passthrough for the "Neritic" assistant
"""
