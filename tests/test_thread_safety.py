"""Thread safety tests for the task list rewrite.

rewrite() keeps all state local to one call, so a single configured
MarkdownIt instance must render independent documents concurrently with
the same results as serial rendering.
"""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from markdown_it import MarkdownIt

from casillas import tasklists_plugin

DOCUMENTS = [
    "- [x] Done\n- [ ] Todo\n- Not a task",
    "1. foo\n   - [ ] nested\n2. bar",
    "- a\n  - b\n    - [X] deep",
    "- [  ] dirty\n- [ x] dirty",
    "> - [ ] quoted\n\n- [x] after",
]


class TestRewriteThreadSafety:
    """Concurrent rendering through a shared pipeline."""

    def test_concurrent_renders_match_serial(self) -> None:
        md = MarkdownIt("commonmark").use(tasklists_plugin, label=True, label_after=True)
        expected = {doc: md.render(doc) for doc in DOCUMENTS}

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = {executor.submit(md.render, doc): doc for doc in DOCUMENTS * 40}
            for future in as_completed(futures):
                assert future.result() == expected[futures[future]]

    def test_label_ids_restart_per_document(self) -> None:
        """Ids come from a per-pass counter, never shared between threads."""
        md = MarkdownIt("commonmark").use(tasklists_plugin, label=True, label_after=True)
        source = "- [ ] a\n- [ ] b\n- [ ] c"
        errors: list[str] = []

        def render() -> None:
            for _ in range(50):
                html = md.render(source)
                ids = [f'id="task-item-{n}"' in html for n in (1, 2, 3)]
                if not all(ids) or 'id="task-item-4"' in html:
                    errors.append(html)

        threads = [threading.Thread(target=render) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []

    def test_per_thread_predicate(self) -> None:
        """A Computed predicate may consult thread-local state."""
        local = threading.local()

        def enabled() -> bool:
            return getattr(local, "editor", False)

        md = MarkdownIt("commonmark").use(tasklists_plugin, enabled=enabled)

        def render(editor: bool) -> str:
            local.editor = editor
            return md.render("- [ ] Todo")

        with ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(render, [True, False] * 20))

        for editor, html in zip([True, False] * 20, results, strict=True):
            assert ('disabled=""' in html) is not editor
