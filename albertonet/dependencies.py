from functools import lru_cache

from fastapi import Depends

from albertonet.db.aws import get_lambda_client, get_s3_client
from albertonet.repos.document_store import DocumentStore
from albertonet.repos.filesystem_store import FilesystemDocumentStore
from albertonet.repos.s3_store import S3DocumentStore
from albertonet.services.contact_service import ContactService
from albertonet.services.localization import Localization, default_localization
from albertonet.services.message_sender import LambdaMessageSender
from albertonet.services.posts_service import PostsService
from albertonet.services.project_service import ProjectService
from albertonet.settings import Settings, settings


def build_document_store(current: Settings) -> DocumentStore:
    retry = {
        "retry_attempts": current.STORAGE_RETRY_ATTEMPTS,
        "retry_backoff": current.STORAGE_RETRY_BACKOFF,
    }
    if current.STORAGE_BACKEND == "s3":
        return S3DocumentStore(
            get_s3_client(),
            bucket=current.S3_BUCKET_NAME,
            max_items=current.S3_MAX_ITEMS,
            **retry,
        )
    return FilesystemDocumentStore(current.CONTENT_ROOT, **retry)


@lru_cache
def get_document_store() -> DocumentStore:
    return build_document_store(settings)


@lru_cache
def get_localization() -> Localization:
    return default_localization(settings.DEFAULT_LOCALE)


@lru_cache
def get_message_sender():
    return LambdaMessageSender(get_lambda_client(), settings.SEND_MESSAGE_FUNCTION_NAME)


def get_posts_service(store=Depends(get_document_store)):
    return PostsService(
        store=store,
        posts_prefix=settings.POSTS_PREFIX,
        top_posts_key=settings.TOP_POSTS_KEY,
        extension=settings.POST_EXTENSION,
    )


def get_project_service(localization=Depends(get_localization)):
    return ProjectService(localization)


def get_contact_service(
    localization=Depends(get_localization),
    sender=Depends(get_message_sender),
):
    return ContactService(localization=localization, sender=sender)
