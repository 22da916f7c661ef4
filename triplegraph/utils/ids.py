"""
Node id generation.
"""

import uuid


def new_node_id(display_name: str, suffix_length: int = 8) -> str:
    """
    Mint a node id: the display name followed by a random hex suffix.

    Ids are unique within a run. They are never reconciled with ids already
    in the graph store, so the same name gets a new id on every run.
    """
    return f"{display_name}_{uuid.uuid4().hex[:suffix_length]}"
