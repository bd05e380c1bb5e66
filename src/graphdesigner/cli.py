#!/usr/bin/env python3
"""
CLI for Graph Schema Designer.

- Generate a schema document from a graph exported by the editor
- Inspect the type names a graph will produce

Usage:
    graph-designer generate graph.json
    graph-designer generate graph.json --output schema.graphql --collision-policy error
    graph-designer inspect graph.json
"""

import argparse
import sys

from dotenv import load_dotenv
from pydantic import ValidationError

from .shared import get_settings, GraphDesignerError, MissingEndpointError
from .services.graph_model import GraphStore
from .services.schema_generation import SchemaGenerationService, FileTarget, StreamTarget
from .services.schema_generation.diagnostics import resolve_edge
from .services.schema_generation.naming import (
    connection_type_name, edge_type_name, input_type_name, query_field_name, type_name
)


def generate_command(args):
    """Generate the schema document for a graph"""
    settings = get_settings()
    if args.collision_policy:
        settings = settings.model_copy(update={'collision_policy': args.collision_policy})
    
    store = GraphStore.load(args.graph, strict=args.strict)
    service = SchemaGenerationService(settings=settings)
    
    output = args.output or settings.default_output_file
    target = FileTarget(output) if output else StreamTarget()
    
    result = service.generate_to(store, target)
    
    for warning in result.warnings:
        print(f"⚠️  {warning}", file=sys.stderr)
    
    if output:
        print(f"✅ Schema for {result.node_count} nodes and {result.edge_count} edges written to: {output}")
    return 0


def inspect_command(args):
    """List nodes and edges with the type names they generate"""
    store = GraphStore.load(args.graph)
    nodes = store.get_all_nodes()
    edges = store.get_all_edges()
    
    print(f"📋 Nodes ({len(nodes)}):")
    for node in nodes:
        print(f"  - {node.label}: type {type_name(node)}, input {input_type_name(node)}, "
              f"query {query_field_name(node)}, {len(node.properties)} properties")
    
    print(f"\n🔗 Edges ({len(edges)}):")
    dangling = 0
    for edge in edges:
        try:
            resolved = resolve_edge(store, edge)
        except MissingEndpointError as e:
            dangling += 1
            print(f"  - {edge.label}: ❌ {e}")
            continue
        print(f"  - {edge.label}: {resolved.start_node.label} -> {resolved.end_node.label}, "
              f"{edge_type_name(resolved)} / {connection_type_name(resolved)}")
    
    return 1 if dangling else 0


def main(argv=None):
    """Main CLI entry point"""
    load_dotenv()
    
    parser = argparse.ArgumentParser(
        description='Graph Schema Designer - derive schema documents from graph models',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    
    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    
    # Generate command
    generate_parser = subparsers.add_parser('generate', help='Generate a schema document')
    generate_parser.add_argument('graph', help='Path to a JSON graph document')
    generate_parser.add_argument('--output', '-o', help='Write the schema to this file instead of stdout')
    generate_parser.add_argument('--collision-policy', choices=['warn', 'error', 'ignore'],
                                 help='Override the configured collision policy')
    generate_parser.add_argument('--strict', action='store_true',
                                 help='Reject edges with missing endpoints while loading')
    generate_parser.set_defaults(func=generate_command)
    
    # Inspect command
    inspect_parser = subparsers.add_parser('inspect', help='Show the names a graph generates')
    inspect_parser.add_argument('graph', help='Path to a JSON graph document')
    inspect_parser.set_defaults(func=inspect_command)
    
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        print("\n💡 Examples:")
        print("  graph-designer generate graph.json --output schema.graphql")
        print("  graph-designer inspect graph.json")
        return 1
    
    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\n⚠️ Operation cancelled by user", file=sys.stderr)
        return 1
    except (GraphDesignerError, ValidationError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
