"""
Exceptions raised inside the importer.

The public entry points (`scrape_product_from_url`, `import_product_from_scrape`)
turn these into tagged result objects.
"""

from typing import Optional

UNSUPPORTED_URL_MESSAGE = "URL no soportada. Usa AliExpress o Alibaba."
HUMAN_VERIFICATION_MESSAGE = "No se pudo extraer información. La página puede requerir verificación humana."


class ImporterError(Exception):
    """Base class for importer errors"""


class UnsupportedSourceError(ImporterError):
    def __init__(self, url: str):
        super().__init__(UNSUPPORTED_URL_MESSAGE)
        self.url = url


class FetchError(ImporterError):
    """Non-2xx response or network failure"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code

    @classmethod
    def from_status(cls, status_code: int) -> "FetchError":
        return cls(f"Error al acceder: {status_code}", status_code=status_code)


class ExtractionError(ImporterError):
    """The page yielded no usable title"""

    def __init__(self, message: str = HUMAN_VERIFICATION_MESSAGE):
        super().__init__(message)


class ProductImportError(ImporterError):
    pass


class StoreApiError(ImporterError):
    """Store API answered with an error payload"""
