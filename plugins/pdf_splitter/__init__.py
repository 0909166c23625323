"""PDF page splitter plugin."""

manifest = {
    "title": "PDF Page Splitter",
    "summary": "Split a PDF into numbered single-page files and download them as a ZIP.",
    "blueprint": "pdf_splitter",
    "category": "Document Utilities",
    "icon": "img/pdf_splitter_icon.png",
}


__all__ = ["manifest"]
