"""Infrastructure Layer — database, persistence adapters, security adapters, logging.

Invariants:
    - Every IO dependency of the pipeline is implemented here behind a
      core/repository_protocols.py Protocol
"""
