from html import escape
from string import Template
from typing import Iterable

HTML_TEMPLATE = Template("""<!DOCTYPE HTML PUBLIC '-//W3C//DTD HTML 4.01//EN' 'http://www.w3.org/TR/html4/strict.dtd'>
<html>
<head>
<meta http-equiv='Content-Type' content='text/html; charset=utf-8'>
<title>Directory listing for $dir</title>
</head>
<body>
<h1>Directory listing for $dir</h1>
<hr>
$file_list
<hr>
</body>
</html>
""")


def render_listing(names: Iterable[str], directory: str) -> bytes:
    items = [f"<li><a href='{escape(name)}'>{escape(name)}</a></li>" for name in names]
    file_list = "\n".join(["<ul>", *items, "</ul>"])
    page = HTML_TEMPLATE.substitute(dir=escape(directory), file_list=file_list)
    return page.encode("utf-8")
