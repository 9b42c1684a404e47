"""Render a checklist with interactive, label-wrapped checkboxes."""

from markdown_it import MarkdownIt

from casillas import tasklists_plugin

md = MarkdownIt("commonmark").use(tasklists_plugin, enabled=True, label=True)
print(md.render("- [x] Write parser\n- [ ] Write docs\n  - [ ] API reference"))
