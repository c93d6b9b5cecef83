"""Hello World -- the simplest quire example.

Define a template as a plain function, wrap it in a component and render it
with arguments. No template files needed.

Run:
    python app.py
"""

from quire import html


@html
def greeting(r, name):
    r.h1(f"Hello, {name}!")


output = greeting.render("World")


def main() -> None:
    print(output)
    print()

    # Multiple renders with different arguments
    for name in ["quire", "Tom & Jerry", "Python"]:
        print(greeting.render(name))


if __name__ == "__main__":
    main()
