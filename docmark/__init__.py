"""
docmark - recovers document structure from Word files.

Paragraph formatting is used to infer headings, list paragraphs are
gathered into lists and bold runs become strong emphasis. The resulting
tree can be exported as Markdown or JSON.
"""

__version__ = "0.1.0"
