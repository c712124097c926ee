"""Calculator tools over stdio. Run with: python examples/calculator_server.py"""

import base64

from tinymcp import ImageContent, TextContent, Tool, ToolBuilder, serve

# 1x1 transparent PNG
PIXEL = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8/5+hHgAHggJ/PchI7wAAAABJRU5ErkJggg=="
)


class Add(Tool, name="add", description="Adds two numbers"):
    def call(self, x, y):
        return x + y


Add.declare_required("x", "number", "First number")
Add.declare_required("y", "number", "Second number")


class Divide(Tool, name="divide", description="Divides x by y"):
    def call(self, x, y, precision=None):
        result = x / y
        return result if precision is None else round(result, precision)


Divide.declare_required("x", "number", "Dividend")
Divide.declare_required("y", "number", "Divisor")
Divide.declare_optional("precision", "integer", "Decimal places to round to")


@ToolBuilder("chart").required("values", "array", "Numbers to plot")
def chart(values):
    """Plots numbers. Returns a summary and a (tiny) image."""
    return [
        TextContent(text=f"{len(values)} values, total {sum(values)}"),
        ImageContent.from_bytes(PIXEL, "image/png"),
    ]


TOOLS = [Add, Divide, chart]

if __name__ == "__main__":
    serve(*TOOLS, server_name="calculator", server_version="0.1.0")
