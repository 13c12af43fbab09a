import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query, Request, Response, Security
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.security import APIKeyHeader
from pydantic import BaseModel

from book import Book
from config import configure_logging, settings
from exceptions import NotFoundError, ValidationError
from library import Library

logger = logging.getLogger(__name__)

# Process-local catalog; nothing survives a restart.
library = Library()


def get_library() -> Library:
    """Dependency returning the catalog served by this process."""
    return library


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("%s %s started", settings.app_name, settings.app_version)
    yield


app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

# --- CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error mapping ---
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError):
    logger.warning("Not found %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=404, content={"detail": str(exc)})


# --- Security ---
api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


def get_api_key(api_key: Optional[str] = Security(api_key_header)):
    """Dependency to validate the API key on mutating routes."""
    if api_key == settings.api_key:
        return api_key
    raise HTTPException(status_code=403, detail="Could not validate credentials")


# --- Models ---
class BookIn(BaseModel):
    title: str
    author: str


class BookOut(BaseModel):
    title: str
    author: str

    @classmethod
    def from_book(cls, book: Book) -> "BookOut":
        return cls(title=book.title, author=book.author)


class StatsOut(BaseModel):
    total_books: int
    unique_authors: int


def _to_out(books: List[Book]) -> List[BookOut]:
    return [BookOut.from_book(b) for b in books]


# --- Health ---
@app.get("/health")
async def health(lib: Library = Depends(get_library)):
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "total_books": len(lib),
        "version": settings.app_version,
    }


# --- Books ---
@app.get("/books", response_model=List[BookOut])
def list_books(lib: Library = Depends(get_library)):
    return _to_out(lib.get_all_books())


@app.post("/books", response_model=BookOut, status_code=201)
def add_book(
    payload: BookIn,
    lib: Library = Depends(get_library),
    api_key: str = Depends(get_api_key),
):
    book = Book(title=payload.title, author=payload.author)
    lib.add_book(book)
    return BookOut.from_book(book)


@app.delete("/books", status_code=204)
def remove_book(
    title: str = Query(...),
    author: str = Query(...),
    lib: Library = Depends(get_library),
    api_key: str = Depends(get_api_key),
):
    lib.remove_book(Book(title=title, author=author))
    return Response(status_code=204)


@app.get("/books/search", response_model=List[BookOut])
def search_books(
    title: Optional[str] = Query(None),
    author: Optional[str] = Query(None),
    lib: Library = Depends(get_library),
):
    if title is None and author is None:
        raise ValidationError("Provide a title and/or an author to search for.")
    if title is not None:
        results = lib.search_by_title(title)
        if author is not None:
            results = [b for b in results if b.matches_author(author)]
    else:
        results = lib.search_by_author(author)
    return _to_out(results)


@app.get("/stats", response_model=StatsOut)
def stats(lib: Library = Depends(get_library)):
    return lib.get_statistics()
