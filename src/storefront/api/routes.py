"""FastAPI routes for the Storefront — catalogue, comments and members.

Each write route translates a Pydantic schema into a Protean command; read
routes assemble their responses from the catalogue queries.
"""

from fastapi import APIRouter, Header, HTTPException
from protean.utils.globals import current_domain

from storefront.api.schemas import (
    AddBookImageRequest,
    AddBookRequest,
    BookCardResponse,
    BookDetailResponse,
    BookIdResponse,
    BookImageResponse,
    BookListResponse,
    CommentIdResponse,
    CommentResponse,
    CreateGenreRequest,
    GenreIdResponse,
    GenreResponse,
    ImageIdResponse,
    MemberIdResponse,
    MemberProfileResponse,
    ModerateCommentRequest,
    PostCommentRequest,
    RegisterMemberRequest,
    StatusResponse,
)
from storefront.basket.catalog import to_catalog_item
from storefront.basket.pricing import unit_price
from storefront.book import queries
from storefront.book.book import Book
from storefront.book.creation import AddBook
from storefront.book.images import AddBookImage
from storefront.comment.moderation import ModerateComment
from storefront.comment.posting import PostComment
from storefront.genre.management import CreateGenre
from storefront.member.member import Member
from storefront.member.registration import RegisterMember

genre_router = APIRouter(prefix="/genres", tags=["genres"])
book_router = APIRouter(prefix="/books", tags=["books"])
comment_router = APIRouter(prefix="/comments", tags=["comments"])
member_router = APIRouter(prefix="/members", tags=["members"])

# Set by the external identity layer once a shopper has signed in
AUTH_HEADER = "X-Authenticated-User"


def book_card(book) -> BookCardResponse:
    item = to_catalog_item(book)
    return BookCardResponse(
        book_id=book.id,
        name=book.name,
        author=book.author,
        genre_id=str(book.genre_id) if book.genre_id else None,
        sale_price=book.sale_price,
        discount_percent=book.discount_percent or 0,
        price=float(unit_price(item)),
        poster_image=item.poster_image,
        is_available=book.is_available,
    )


# ---------------------------------------------------------------------------
# Genres
# ---------------------------------------------------------------------------
@genre_router.post("", status_code=201, response_model=GenreIdResponse)
async def create_genre(body: CreateGenreRequest) -> GenreIdResponse:
    genre_id = current_domain.process(CreateGenre(name=body.name), asynchronous=False)
    return GenreIdResponse(genre_id=genre_id)


@genre_router.get("", response_model=list[GenreResponse])
async def list_genres() -> list[GenreResponse]:
    return [
        GenreResponse(genre_id=str(genre.id), name=genre.name, book_count=count)
        for genre, count in queries.genres_with_counts()
    ]


# ---------------------------------------------------------------------------
# Books
# ---------------------------------------------------------------------------
@book_router.post("", status_code=201, response_model=BookIdResponse)
async def add_book(body: AddBookRequest) -> BookIdResponse:
    command = AddBook(
        name=body.name,
        author=body.author,
        description=body.description,
        genre_id=body.genre_id,
        sale_price=body.sale_price,
        discount_percent=body.discount_percent,
        is_available=body.is_available,
    )
    book_id = current_domain.process(command, asynchronous=False)
    return BookIdResponse(book_id=book_id)


@book_router.post("/{book_id}/images", status_code=201, response_model=ImageIdResponse)
async def add_book_image(book_id: int, body: AddBookImageRequest) -> ImageIdResponse:
    command = AddBookImage(book_id=book_id, image=body.image, poster_status=body.poster_status)
    image_id = current_domain.process(command, asynchronous=False)
    return ImageIdResponse(image_id=image_id)


@book_router.get("", response_model=BookListResponse)
async def list_books(genre_id: str | None = None) -> BookListResponse:
    """Shop page: every genre plus the books, optionally of one genre."""
    genres = [
        GenreResponse(genre_id=str(genre.id), name=genre.name, book_count=count)
        for genre, count in queries.genres_with_counts()
    ]
    return BookListResponse(genres=genres, books=[book_card(b) for b in queries.list_books(genre_id)])


@book_router.get("/{book_id}", response_model=BookDetailResponse)
async def book_detail(book_id: int) -> BookDetailResponse:
    book = current_domain.repository_for(Book).get(book_id)
    return BookDetailResponse(
        book=book_card(book),
        description=book.description,
        genre_name=queries.genre_name(book.genre_id),
        images=[
            BookImageResponse(image_id=str(i.id), image=i.image, poster_status=i.poster_status) for i in book.images
        ],
        comments=[
            CommentResponse(
                comment_id=str(c.id),
                full_name=c.full_name,
                text=c.text,
                created_at=c.created_at.isoformat() if c.created_at else None,
            )
            for c in queries.approved_comments(book.id)
        ],
        related_books=[book_card(b) for b in queries.related_books(book)],
    )


@book_router.post("/{book_id}/comments", status_code=201, response_model=CommentIdResponse)
async def post_comment(
    book_id: int,
    body: PostCommentRequest,
    authenticated_user: str | None = Header(default=None, alias=AUTH_HEADER),
) -> CommentIdResponse:
    command = PostComment(
        book_id=book_id,
        text=body.text,
        full_name=body.full_name,
        email=body.email,
        username=authenticated_user,
    )
    comment_id = current_domain.process(command, asynchronous=False)
    return CommentIdResponse(comment_id=comment_id)


# ---------------------------------------------------------------------------
# Comment moderation
# ---------------------------------------------------------------------------
@comment_router.put("/{comment_id}/moderate", response_model=StatusResponse)
async def moderate_comment(comment_id: str, body: ModerateCommentRequest) -> StatusResponse:
    command = ModerateComment(comment_id=comment_id, action=body.action, reason=body.reason)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------
@member_router.post("", status_code=201, response_model=MemberIdResponse)
async def register_member(body: RegisterMemberRequest) -> MemberIdResponse:
    command = RegisterMember(
        username=body.username,
        email=body.email,
        full_name=body.full_name,
        password=body.password,
    )
    member_id = current_domain.process(command, asynchronous=False)
    return MemberIdResponse(member_id=member_id)


@member_router.get("/me", response_model=MemberProfileResponse)
async def member_profile(
    authenticated_user: str | None = Header(default=None, alias=AUTH_HEADER),
) -> MemberProfileResponse:
    """Profile of the signed-in member, as identified by the identity layer."""
    if not authenticated_user:
        raise HTTPException(status_code=401, detail="Sign in to view your profile")

    member = Member.find_by_username(authenticated_user)
    if member is None:
        raise HTTPException(status_code=401, detail="Unknown member")

    return MemberProfileResponse(
        member_id=str(member.id),
        username=member.username,
        email=member.email,
        full_name=member.full_name,
        role=member.role,
    )
