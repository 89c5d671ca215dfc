"""Article body blocks - edit operations, embeds, reading time, rendering."""

from newsdesk.blocks.document import Document, append, find, index_of, new_block, remove, reposition, update
from newsdesk.blocks.embeds import TweetRef, extract_tweet, extract_youtube_id, youtube_thumbnail_url
from newsdesk.blocks.ids import IdFactory, new_block_id
from newsdesk.blocks.reading_time import estimate
from newsdesk.blocks.serialization import dump_blocks, dumps, load_blocks, loads

__all__ = [
    "Document",
    "IdFactory",
    "TweetRef",
    "append",
    "dump_blocks",
    "dumps",
    "estimate",
    "extract_tweet",
    "extract_youtube_id",
    "find",
    "index_of",
    "load_blocks",
    "loads",
    "new_block",
    "new_block_id",
    "remove",
    "reposition",
    "update",
    "youtube_thumbnail_url",
]
