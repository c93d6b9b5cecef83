"""Concurrent rendering -- free-threading proof with 8 threads.

Each render allocates its own renderer and render context and passes them
explicitly to every nested template, so simultaneous renders of the same
component never see each other's namespace or deferred blocks.

Run:
    python app.py
"""

from concurrent.futures import ThreadPoolExecutor

from quire import html


@html
def article(r, page_id, title, tags):
    r.ns["tag_count"] = 0

    def tag_list(r):
        for tag in tags:
            r.ns["tag_count"] += 1
            r.li(tag)

    def body(r):
        r.h1(title)
        # The count is only known once the list below has rendered.
        r.p(lambda r: r.defer(lambda r: r.text(f"{r.ns['tag_count']} tags")))
        r.ul(tag_list)

    r.article(body, id=f"page-{page_id}")


pages = [
    {"page_id": i, "title": f"Page {i}", "tags": [f"tag-{i}-a", f"tag-{i}-b", f"tag-{i}-c"]}
    for i in range(8)
]


def render_page(page: dict) -> str:
    """Render a single page -- called from a worker thread."""
    return article.render(**page)


with ThreadPoolExecutor(max_workers=8) as pool:
    results = list(pool.map(render_page, pages))

output = "\n".join(results)


def main() -> None:
    print(f"Rendered {len(results)} pages across 8 threads:\n")
    for i, markup in enumerate(results):
        print(f"--- Thread {i} ---")
        print(markup)
        print()


if __name__ == "__main__":
    main()
