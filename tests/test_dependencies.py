from albertonet import dependencies as deps
from albertonet.repos.filesystem_store import FilesystemDocumentStore
from albertonet.repos.s3_store import S3DocumentStore
from albertonet.services.contact_service import ContactService
from albertonet.services.localization import Localization
from albertonet.services.posts_service import PostsService
from albertonet.settings import Settings


def test_build_document_store_defaults_to_filesystem(tmp_path):
    store = deps.build_document_store(
        Settings(STORAGE_BACKEND="filesystem", CONTENT_ROOT=str(tmp_path), STORAGE_RETRY_ATTEMPTS=4)
    )

    assert isinstance(store, FilesystemDocumentStore)
    assert store.root == tmp_path.resolve()
    assert store.retry_attempts == 4


def test_build_document_store_selects_s3(monkeypatch):
    client = object()
    monkeypatch.setattr(deps, "get_s3_client", lambda: client)

    store = deps.build_document_store(
        Settings(STORAGE_BACKEND="s3", S3_BUCKET_NAME="bucket", S3_MAX_ITEMS=20)
    )

    assert isinstance(store, S3DocumentStore)
    assert store.client is client
    assert store.bucket == "bucket"
    assert store.max_items == 20


def test_get_posts_service_constructs_service():
    class FakeStore:
        pass

    store = FakeStore()
    svc = deps.get_posts_service(store=store)

    assert isinstance(svc, PostsService)
    assert svc.store is store


def test_get_localization_is_shared():
    assert isinstance(deps.get_localization(), Localization)
    assert deps.get_localization() is deps.get_localization()


def test_get_message_sender_builds_client_once(monkeypatch):
    built = []
    monkeypatch.setattr(deps, "get_lambda_client", lambda: built.append(1) or object())
    deps.get_message_sender.cache_clear()

    try:
        first = deps.get_message_sender()
        second = deps.get_message_sender()
    finally:
        deps.get_message_sender.cache_clear()

    assert first is second
    assert built == [1]


def test_get_contact_service_constructs_service():
    sender = object()
    svc = deps.get_contact_service(localization=deps.get_localization(), sender=sender)

    assert isinstance(svc, ContactService)
    assert svc.sender is sender
