"""Genre management — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.genre.genre import Genre


@storefront.command(part_of="Genre")
class CreateGenre:
    name = String(required=True, max_length=100)


@storefront.command_handler(part_of=Genre)
class ManageGenresHandler:
    @handle(CreateGenre)
    def create_genre(self, command):
        repo = current_domain.repository_for(Genre)

        name = command.name.strip()
        existing = repo._dao.query.filter(name=name).all()
        if existing.items:
            raise ValidationError({"name": [f"Genre '{name}' already exists"]})

        genre = Genre.create(name=name)
        repo.add(genre)
        return str(genre.id)
