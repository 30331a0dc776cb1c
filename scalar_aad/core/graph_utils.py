"""
Graph inspection helpers.

Trace lines for individual handles and summary statistics for a whole tape.
"""

from collections import Counter
from typing import Dict

import numpy as np

from .tape import Tape
from .var import Var


def format_trace(v: Var) -> str:
    """One-line trace of a handle: 'Value: <value>, Gradient: <gradient>'."""
    return f"Value: {float(v.data):f}, Gradient: {float(v.grad):f}"


def print_trace(*vs: Var) -> None:
    for v in vs:
        print(format_trace(v))


def get_graph_stats(tape: Tape) -> Dict:
    """
    Collect statistics about a tape (no printing).

    Returns:
        dict with node/edge counts, fan-in/fan-out and an operation breakdown
    """
    if not tape.nodes:
        return {
            'nodes': 0,
            'edges': 0,
            'leaves': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    n_nodes = len(tape.nodes)
    fan_ins = [len(node.operands) for node in tape.nodes]
    n_edges = sum(fan_ins)

    # a node reached twice from the same parent counts twice
    fan_outs = [0] * n_nodes
    for node in tape.nodes:
        for i in node.operands:
            fan_outs[i] += 1

    op_counter = Counter(node.op.tag for node in tape.nodes)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': op_counter.get('leaf', 0),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(tape: Tape, detailed: bool = False) -> Dict:
    """
    Print a summary of the tape and return the same statistics as get_graph_stats.

    Args:
        tape: the tape to summarize
        detailed: also list the first 100 nodes
    """
    stats = get_graph_stats(tape)
    if stats['nodes'] == 0:
        print("Empty computation graph")
        return stats

    print("\n" + "=" * 70)
    print("COMPUTATION GRAPH SUMMARY")
    print("=" * 70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_tag, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_tag:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed:
        print()
        for i, node in enumerate(tape.nodes[:100]):
            if node.operands:
                operand_info = ", ".join(f"Node{j}" for j in node.operands)
                print(f"Node {i:4d}: {node.op.tag:6s} ({float(node.value):10.6f}) <- [{operand_info}]")
            else:
                print(f"Node {i:4d}: {node.op.tag:6s} ({float(node.value):10.6f}) [leaf/input]")
        if len(tape.nodes) > 100:
            print(f"... ({len(tape.nodes) - 100} more nodes)")

    print("=" * 70 + "\n")
    return stats
