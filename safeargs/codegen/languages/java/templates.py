"""
Built-in Jinja2 templates for Java directions files.

Members arrive pre-rendered; templates only lay them out, so nested
classes reuse ``type.java.j2`` through the ``indent`` filter.
"""

FILE_TEMPLATE = """\
{% if header %}
{{ header | comment }}
{% endif %}
{% if package_name %}
package {{ package_name }};

{% endif %}
{% for name in imports %}
import {{ name }};
{% endfor %}
{% if imports %}

{% endif %}
{{ type_source }}
"""

TYPE_TEMPLATE = """\
{{ declaration }} {
{% for block in blocks %}
{% if not loop.first %}

{% endif %}
{{ block | indent }}
{% endfor %}
}"""

METHOD_TEMPLATE = """\
{{ signature }} {
{% for statement in statements %}
{{ statement | indent }};
{% endfor %}
}"""

BUILTIN_TEMPLATES = {
    "file.java.j2": FILE_TEMPLATE,
    "type.java.j2": TYPE_TEMPLATE,
    "method.java.j2": METHOD_TEMPLATE,
}
