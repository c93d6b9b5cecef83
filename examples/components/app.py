"""Reusable components -- slots, currying and extensions.

A card component wraps caller content with ``emit_yield()``; the page passes
that content as an inner block. The alert lives in a small extension
registered on its own registry, so the page reaches it as ``r.ui.alert(...)``.

Run:
    python app.py
"""

from types import SimpleNamespace

from quire import ExtensionRegistry, html


def alert(r, message, *, level="info"):
    r.div(message, class_=f"alert alert-{level}", role="alert")


registry = ExtensionRegistry()
registry.register(ui=SimpleNamespace(alert=alert))


@html
def card(r, title):
    def body(r):
        r.div(title, class_="card-header")
        r.div(lambda r: r.emit_yield(), class_="card-body")

    r.section(body, class_="card")


def page(r, title, features, warning_message):
    def content(r):
        r.h1(title)
        r.ui.alert(warning_message, level="warning")
        for feature in features:
            desc = feature["desc"]
            r.emit(card.apply(lambda r, desc=desc: r.p(desc)), feature["name"])

    r.html5(lambda r: r.body(content))


page_component = html(page, extensions=registry)

output = page_component.render(
    "Component Demo",
    features=[
        {"name": "Plain Python", "desc": "Templates are ordinary functions"},
        {"name": "Free-threading", "desc": "Safe for concurrent rendering"},
        {"name": "Zero deps", "desc": "Pure Python, no dependencies"},
    ],
    warning_message="This is an alpha release. API may change.",
)


def main() -> None:
    print(output)


if __name__ == "__main__":
    main()
