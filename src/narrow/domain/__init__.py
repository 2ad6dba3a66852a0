"""Domain layer - candidate records, errors, protocols and events.

This layer contains:
- candidate: The Candidate record and coercion of caller-supplied items
- errors: The narrowing error taxonomy
- protocols: Interfaces for replaceable pipeline stages and history stores
- events: Host-facing hook events and the event bus

The domain layer has NO dependencies on the core or presentation layers.
"""
