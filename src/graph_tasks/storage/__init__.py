"""
Graph storage.

Components:
- graph_store.py: GraphTaskStore, the Task/Report <-> property graph mapping
- decoding.py: schema-driven strict decoding of untyped result rows
- connection.py: FalkorDB client and graph selection for the composition root
"""
