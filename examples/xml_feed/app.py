"""XML documents -- an Atom feed rendered in XML mode.

XML mode escapes text with the XML entities (``&apos;`` for apostrophes)
and has no HTML helpers, so every attribute name is just a tag.

Run:
    python app.py
"""

from quire import xml

entries = [
    {"id": "urn:post:1", "title": "Hello, XML", "href": "/posts/1"},
    {"id": "urn:post:2", "title": "It's <deferred>", "href": "/posts/two words"},
]


@xml
def feed(r, title, entries):
    def body(r):
        r.title(title)
        r.updated(lambda r: r.defer(lambda r: r.text(r.ns["updated"])))
        for entry in entries:
            r.emit(feed_entry, entry)

    r.emit('<?xml version="1.0" encoding="utf-8"?>')
    r.feed(body, xmlns="http://www.w3.org/2005/Atom")


@xml
def feed_entry(r, entry):
    r.ns["updated"] = entry["id"]

    def body(r):
        r.id(entry["id"])
        r.title(entry["title"])
        r.link(href=entry["href"])

    r.entry(body)


output = feed.render("quire blog", entries)


def main() -> None:
    print(output)
    print(feed.mime_type)


if __name__ == "__main__":
    main()
