"""
Example usage of the schema generator.

Builds a small blog graph in memory, generates its schema document and
writes it to stdout.
"""

from graphdesigner import (
    GraphEdge,
    GraphNode,
    GraphStore,
    PropertyDescriptor,
    SchemaGenerationService,
    StreamTarget,
)


def build_blog_graph() -> GraphStore:
    """Create an author/post graph with one relation."""
    store = GraphStore()
    
    author = store.add_node(GraphNode(
        label="Author",
        properties=[
            PropertyDescriptor(key="name", type="String", description="display name",
                               is_required=True, limit_min=2, limit_max=60),
            PropertyDescriptor(key="email", type="Email", description="contact address"),
            PropertyDescriptor(key="joinedAt", type="Datetime", description="signup time",
                               is_auto_generated=True),
        ],
    ))
    post = store.add_node(GraphNode(
        label="blog post",
        properties=[
            PropertyDescriptor(key="title", type="String", is_required=True),
            PropertyDescriptor(key="rating", type="Float", limit_min=0, limit_max=5, default_value=0),
        ],
    ))
    store.add_edge(GraphEdge(
        label="wrote",
        start_node_id=author.id,
        end_node_id=post.id,
        properties=[PropertyDescriptor(key="coAuthored", type="Boolean", default_value=False)],
    ))
    
    return store


def main():
    store = build_blog_graph()
    service = SchemaGenerationService()
    
    result = service.generate_to(store, StreamTarget())
    for warning in result.warnings:
        print(f"warning: {warning}")


if __name__ == "__main__":
    main()
