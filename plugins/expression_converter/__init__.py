"""Expression Converter plugin manifest."""

manifest = {
    "title": "Expression Converter",
    "summary": "Convert infix arithmetic to postfix and prefix notation and evaluate the result step by step.",
    "category": "General Utilities",
    "blueprint": "expression_converter",
}

__all__ = ["manifest"]
