"""Layouts with deferred content -- the page title set by a nested view.

The layout reserves the ``<title>`` and the stylesheet links with
``r.defer()``. Both are filled in after the body has rendered, so the view
rendered inside the layout decides them through ``r.ns``. Arguments given
to the layout are passed on to the view.

Run:
    python app.py
"""

from quire import html


@html
def layout(r, *args, **kwargs):
    r.ns["stylesheets"] = ["/assets/base.css"]

    def title(r):
        r.title(r.ns.get("title", "Untitled"))

    def stylesheets(r):
        for href in r.ns["stylesheets"]:
            r.link_stylesheet(href)

    def head(r):
        r.defer(title)
        r.defer(stylesheets)

    def document(r):
        r.head(head)
        r.body(lambda r: r.emit_yield(*args, **kwargs))

    r.html5(document)


def article(r, title, paragraphs):
    r.ns["title"] = f"{title} | Blog"
    r.ns["stylesheets"].append("/assets/article.css")

    def body(r):
        r.h1(title)
        for paragraph in paragraphs:
            r.p(paragraph)

    r.article(body)


article_page = layout.apply(article)

output = article_page.render(
    "Deferred rendering",
    ["Blocks run last.", "Their output lands where they were registered."],
)


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
