"""
Pydantic schemas for movie records.

Movie records are served exactly as they appear in the data file, so
these models are only used to document the response shape in the
OpenAPI schema.  They follow the OMDb layout; ``extra="allow"`` keeps
any additional fields a data file may carry.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Rating(BaseModel):
    """A single rating from an external source."""

    Source: str
    Value: str


class Movie(BaseModel):
    """Schema for reading a movie record."""

    model_config = ConfigDict(extra="allow")

    imdbID: str = Field(..., description="IMDb identifier used to look the movie up, e.g. ``tt0111161``")
    Title: Optional[str] = None
    Year: Optional[str] = None
    Rated: Optional[str] = None
    Released: Optional[str] = None
    Runtime: Optional[str] = None
    Genre: Optional[str] = None
    Director: Optional[str] = None
    Writer: Optional[str] = None
    Actors: Optional[str] = None
    Plot: Optional[str] = None
    Language: Optional[str] = None
    Country: Optional[str] = None
    Awards: Optional[str] = None
    Poster: Optional[str] = None
    Ratings: Optional[List[Rating]] = None
    Metascore: Optional[str] = None
    imdbRating: Optional[str] = None
    imdbVotes: Optional[str] = None
    Type: Optional[str] = None
    DVD: Optional[str] = None
    BoxOffice: Optional[str] = None
    Production: Optional[str] = None
    Website: Optional[str] = None
    Response: Optional[str] = None
