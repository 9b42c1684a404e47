"""Benchmark markdown-it-py with and without the task list rewrite.

Run with:
    python benchmarks/benchmark_task_lists.py
"""

import time
from collections.abc import Callable


def make_corpus(sections: int = 200) -> list[str]:
    """Generate checklist-heavy documents with nested lists."""
    docs = []
    for i in range(sections):
        docs.append(f"""
# Release {i}

- [x] tag v{i}
- [ ] publish notes for **v{i}**
- plain item
  1. [ ] nested step {i}
  2. [X] nested step {i + 1}
     - deeper
       - [ ] deepest {i}

Some paragraph with [a link](https://example.com/{i}) and `code`.

- [  ] not a task
- [x ] not a task either
""")
    return docs


def time_renders(render: Callable[[str], str], docs: list[str], iterations: int = 10) -> float:
    """Average seconds per pass over ``docs``."""
    # Warmup
    for doc in docs[:10]:
        render(doc)

    start = time.perf_counter()
    for _ in range(iterations):
        for doc in docs:
            render(doc)
    elapsed = time.perf_counter() - start

    return elapsed / iterations


def main() -> None:
    """Run benchmarks and print results."""
    import sys

    from markdown_it import MarkdownIt

    from casillas import tasklists_plugin

    docs = make_corpus()
    print(f"Generated {len(docs)} documents")
    print(f"Python {sys.version.split()[0]}\n")

    baseline = time_renders(MarkdownIt("commonmark").render, docs)
    plain = time_renders(MarkdownIt("commonmark").use(tasklists_plugin).render, docs)
    labeled = time_renders(
        MarkdownIt("commonmark").use(tasklists_plugin, enabled=True, label=True).render, docs
    )

    print(f"{'Pipeline':<28} {'ms/pass':>10} {'overhead':>10}")
    print("-" * 50)
    for name, seconds in (
        ("markdown-it-py", baseline),
        ("+ task_lists", plain),
        ("+ task_lists (label)", labeled),
    ):
        overhead = (seconds / baseline - 1) * 100
        print(f"{name:<28} {seconds * 1000:>10.2f} {overhead:>9.1f}%")


if __name__ == "__main__":
    main()
