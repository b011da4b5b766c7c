""" Invoke tasks. """
import io
import shutil
import sys
from pathlib import Path
from invoke.tasks import task

if isinstance(sys.stdout, io.TextIOWrapper):
    sys.stdout.reconfigure(encoding='utf-8')


@task
def install(c):
    c.run('pip install -e ".[test,dev]"')


@task
def serve(c, port=8001):
    c.run(f"uvicorn main:app --reload --host 127.0.0.1 --port {port}")


@task
def test(c, k=None):
    c.run("pytest -q" + (f" -k {k}" if k else ""))


@task(iterable=["algorithm"])
def cover(c, vertices=None, edges=None, graph_type="class_time", algorithm=None):
    """
    Cover a conflict graph read from vertex/edge tables and print the shapes.

    Example: invoke cover --vertices data/v.csv --edges data/e.csv -a clique -a odd_cycle
    """
    from cover.builder import build_cover_model
    from cover.stats import cover_summary
    from utils.loader import load_conflict_graph

    graph = load_conflict_graph(vertices, edges, graph_type)
    state = build_cover_model(graph, algorithms=algorithm or None, allow_partial_cycles=True)
    residual = [[v1, v2] for v1, v2, _ in state.residual_edges]
    summary = cover_summary(
        state.cliques + residual + state.bipartite_cliques,
        state.stars + state.special_stars,
        state.odd_cycles,
    )
    print(summary.to_string(index=False))
    for key, value in state.stats.items():
        print(f"{key}: {value}")


@task
def clean(c):
    """Remove __pycache__ folders and .pyc files (works the same on every OS)."""
    root = Path(__file__).resolve().parent
    for cache in root.rglob("__pycache__"):
        shutil.rmtree(cache, ignore_errors=True)
    for pyc in root.rglob("*.pyc"):
        pyc.unlink(missing_ok=True)
