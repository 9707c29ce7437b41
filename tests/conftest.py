import io
import json
import textwrap

from botocore.exceptions import ClientError

from albertonet.exceptions import StorageTransportError
from albertonet.repos.document_store import DocumentStore


def make_client_error(code: str, operation: str = "GetObject", status: int = 400):
    return ClientError(
        {
            "Error": {"Code": code, "Message": code},
            "ResponseMetadata": {"HTTPStatusCode": status},
        },
        operation,
    )


def mdx(text: str) -> bytes:
    """Dedent an inline document and encode it like a stored object."""
    return textwrap.dedent(text).lstrip().encode("utf-8")


class FakeStore(DocumentStore):
    """
    In-memory DocumentStore.
    `errors` maps a key to an exception raised on every read of that key.
    """

    def __init__(self, docs: dict[str, bytes], errors: dict | None = None, **kwargs):
        kwargs.setdefault("retry_backoff", 0)
        super().__init__(**kwargs)
        self.docs = docs
        self.errors = errors or {}
        self.reads = []

    async def _list(self, prefix: str):
        return sorted(key for key in self.docs if key.startswith(prefix))

    async def _read(self, path: str):
        self.reads.append(path)
        if path in self.errors:
            raise self.errors[path]
        return self.docs.get(path)


class FlakyStore(FakeStore):
    """Fails `failures` times with a transient error before answering."""

    def __init__(self, docs, failures: int, transient: bool = True, **kwargs):
        super().__init__(docs, **kwargs)
        self.failures = failures
        self.transient = transient

    async def _read(self, path: str):
        self.reads.append(path)
        if self.failures > 0:
            self.failures -= 1
            raise StorageTransportError(path, OSError("boom"), transient=self.transient)
        return self.docs.get(path)


class FakeS3Client:
    """
    Minimal boto3 S3 client stand-in.
    `errors` maps an operation name to a list of exceptions raised in order.
    """

    def __init__(self, objects: dict[str, bytes], errors: dict | None = None):
        self.objects = objects
        self.errors = errors or {}
        self.calls = []

    def _maybe_raise(self, operation: str):
        pending = self.errors.get(operation)
        if pending:
            raise pending.pop(0)

    def list_objects_v2(self, Bucket, Prefix, MaxKeys):
        self.calls.append(("list_objects_v2", Bucket, Prefix, MaxKeys))
        self._maybe_raise("list_objects_v2")
        keys = sorted(key for key in self.objects if key.startswith(Prefix))
        response = {"IsTruncated": len(keys) > MaxKeys, "KeyCount": min(len(keys), MaxKeys)}
        if keys:
            response["Contents"] = [{"Key": key} for key in keys[:MaxKeys]]
        return response

    def get_object(self, Bucket, Key):
        self.calls.append(("get_object", Bucket, Key))
        self._maybe_raise("get_object")
        if Key not in self.objects:
            raise make_client_error("NoSuchKey", status=404)
        return {"Body": io.BytesIO(self.objects[Key])}


class FakeLambdaClient:
    def __init__(self, response_payload=None, error: Exception | None = None):
        self.response_payload = (
            {"StatusCode": 200} if response_payload is None else response_payload
        )
        self.error = error
        self.calls = []

    def invoke(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        payload = self.response_payload
        if not isinstance(payload, bytes):
            payload = json.dumps(payload).encode("utf-8")
        return {"StatusCode": 200, "Payload": io.BytesIO(payload)}


class FakeSender:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.sent = []

    def send_contact_notification(self, message):
        if self.error:
            raise self.error
        self.sent.append(message)


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        posts=None,
        post=None,
        slugs=None,
        top_posts=None,
        error: Exception | None = None,
    ):
        self._posts = posts or []
        self._post = post
        self._slugs = slugs or []
        self._top_posts = top_posts or []
        self._error = error

    async def get_posts(self):
        if self._error:
            raise self._error
        return self._posts

    async def list_post_slugs(self):
        if self._error:
            raise self._error
        return self._slugs

    async def get_top_posts(self):
        if self._error:
            raise self._error
        return self._top_posts

    async def get_post_by_slug(self, slug: str):
        if self._error:
            raise self._error
        return self._post
