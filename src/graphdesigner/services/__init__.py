"""
Domain services for Graph Schema Designer.

- graph_model: In-memory registry of the nodes and edges being designed
- schema_generation: Derives schema documents from a graph model
"""
