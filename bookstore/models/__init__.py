from bookstore.models.author import Author, AuthorPublic
from bookstore.models.country import Country, CountryPublic

__all__ = ["Author", "AuthorPublic", "Country", "CountryPublic"]
