"""Parse one opening tag and print what was found."""

from tagcursor import parse

element = parse('<a href="https://example.com" target="_blank">')
print(element.tag_name, element.attrs, f"{element.start}-{element.end}")
