from domain.models.song import Song, SongFilter  # noqa: F401
