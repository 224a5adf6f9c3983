# 歌詞の節 (verse) は空行で区切られる
VERSE_SEPARATOR = "\n\n"

# 外部APIのリリース日フォーマット (DD.MM.YYYY)
RELEASE_DATE_FORMAT = "%d.%m.%Y"

# Pagination defaults
DEFAULT_PAGE = 1
DEFAULT_SONGS_PAGE_SIZE = 10
DEFAULT_VERSES_PAGE_SIZE = 4

# IDはunsigned 32bitの範囲に制限する
MAX_SONG_ID = 2**32 - 1
