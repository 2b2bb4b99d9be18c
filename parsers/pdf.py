import io
import re
import logging
import fitz  # PyMuPDF

logger = logging.getLogger(__name__)

BULLETS = "•▪●◦‣"


def clean_jd_text(text: str) -> str:
    """
    Tidy text pulled out of a JD PDF before it is parsed.
    Rejoins words hyphenated across line breaks, turns bullet glyphs into
    spaces, collapses runs of spaces and drops blank lines.
    """
    text = re.sub(r"(\w)-\n(\w)", r"\1\2", text)
    text = re.sub(f"[{BULLETS}]", " ", text)
    lines = (re.sub(r"[ \t\xa0]+", " ", line).strip() for line in text.splitlines())
    return "\n".join(line for line in lines if line)


def pdf_to_text(source) -> str:
    """
    Extract job description text from a PDF path or an uploaded file object.
    Returns an empty string when the PDF cannot be read.
    """
    try:
        if isinstance(source, (str, bytes)):
            doc = fitz.open(source)
        else:
            doc = fitz.open(stream=io.BytesIO(source.read()), filetype="pdf")

        with doc:
            pages = [page.get_text("text") for page in doc]
        logger.info(f"Read {len(pages)} page(s) from JD PDF")
        return clean_jd_text("\n".join(pages))

    except Exception as e:
        logger.warning(f"PDF extraction failed: {e}")
        return ""
