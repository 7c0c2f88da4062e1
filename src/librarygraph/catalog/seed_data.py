"""Built-in catalog data, in definition order."""

from .models import BookRecord, LibraryRecord

DEFAULT_LIBRARIES: tuple[LibraryRecord, ...] = (
    LibraryRecord(branch="downtown"),
    LibraryRecord(branch="riverside"),
)

# The branch field of a book indicates which library has it in stock
DEFAULT_BOOKS: tuple[BookRecord, ...] = (
    BookRecord(title="The Awakening", author="Kate Chopin", branch="riverside"),
    BookRecord(title="City of Glass", author="Paul Auster", branch="downtown"),
)
