import datetime
import logging
import math
import re
from typing import List, Mapping, Optional

import frontmatter
from frontmatter.default_handlers import BaseHandler

from albertonet.exceptions import MalformedDocument, MissingMetadataField
from albertonet.schemas.blog import ParsedFrontMatter, Post

logger = logging.getLogger(__name__)

SEPARATOR = ": "
_QUOTED = re.compile(r"""^(['"])(.*)\1$""", re.DOTALL)

REQUIRED_FIELDS = ("title", "description", "categories", "publicationDate")
class FlatHandler(BaseHandler):
    """
    Front matter handler for flat `key: value` headers between `---` lines.

    Values are kept as strings; one layer of matching quotes is stripped.
    """

    FM_BOUNDARY = re.compile(r"^---$", re.MULTILINE)
    START_DELIMITER = "---"
    END_DELIMITER = "---"

    def load(self, fm: str, **kwargs) -> dict[str, str]:
        metadata: dict[str, str] = {}
        # fm starts right after the opening delimiter, so line numbers match the document
        for number, line in enumerate(fm.split("\n"), start=1):
            if not line.strip():
                continue
            key, sep, value = line.partition(SEPARATOR)
            key = key.strip()
            if not sep or not key:
                raise ValueError(f"Invalid front matter line {number}: {line!r}")
            metadata[key] = _unquote(value.strip())
        return metadata

    def export(self, metadata: Mapping[str, object], **kwargs) -> str:
        return "\n".join(f"{key}{SEPARATOR}{value}" for key, value in metadata.items())


def _unquote(value: str) -> str:
    match = _QUOTED.match(value)
    return match.group(2) if match else value


class ContentParser:
    def __init__(self, handler: Optional[BaseHandler] = None):
        self.handler = handler or FlatHandler()

    def parse(self, raw_text: str, path: Optional[str] = None) -> ParsedFrontMatter:
        """Split the front matter block from the body of a document."""
        text = raw_text.replace("\r\n", "\n").rstrip()

        if not self.handler.detect(text):
            raise MalformedDocument("Document does not start with a '---' line", path)

        try:
            fm, content = self.handler.split(text)
        except ValueError:
            raise MalformedDocument("Front matter has no closing '---' line", path)

        try:
            metadata = self.handler.load(fm)
        except ValueError as e:
            raise MalformedDocument(str(e), path) from e

        logger.debug(f"Parsed {len(metadata)} front matter keys for {path or 'document'}")
        return ParsedFrontMatter(metadata=metadata, content=content.strip())

    def serialize(self, metadata: Mapping[str, str], content: str) -> str:
        post = frontmatter.Post(content, handler=self.handler)
        post.metadata.update(metadata)
        return frontmatter.dumps(post, handler=self.handler)


def parse_front_matter(raw_text: str, path: Optional[str] = None) -> ParsedFrontMatter:
    return ContentParser().parse(raw_text, path)


def build_post(slug: str, raw: bytes, *, parser: ContentParser) -> Post:
    """Assemble a Post from a stored document."""
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedDocument(f"Document is not valid UTF-8: {e}", slug) from e

    parsed = parser.parse(text, path=slug)
    metadata = parsed.metadata

    for field in REQUIRED_FIELDS:
        if field not in metadata:
            raise MissingMetadataField(field, slug)

    last_modified = metadata.get("lastModifiedDate")

    return Post(
        slug=slug,
        title=metadata["title"],
        description=metadata["description"],
        categories=split_categories(metadata["categories"]),
        content=parsed.content,
        image=metadata.get("image") or None,
        publicationDate=_parse_date(metadata["publicationDate"], "publicationDate", slug),
        lastModifiedDate=(
            _parse_date(last_modified, "lastModifiedDate", slug) if last_modified else None
        ),
        readingTime=calculate_reading_time(parsed.content),
    )


def slug_from_path(path: str, extension: str = ".mdx") -> str:
    return path.rsplit("/", 1)[-1].removesuffix(extension)


def split_categories(value: str) -> List[str]:
    return [part.strip() for part in value.split(";") if part.strip()]


def _parse_date(value: str, field: str, slug: str) -> datetime.date:
    try:
        return datetime.datetime.fromisoformat(value).date()
    except ValueError:
        raise MalformedDocument(f"Field '{field}' is not a valid date: {value!r}", slug)


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / 200) or 1
    return f"{minutes} min"
