"""
Tests for listing photos and avatars: validation, storage, the per-listing
limit and atomic updates of the image list.
"""

import asyncio
import io
import uuid

import pytest
from fastapi import UploadFile
from sqlalchemy import update
from starlette.datastructures import Headers

from app.models.property import Property
from app.repositories.property import IMAGE_UPDATE_ATTEMPTS, ConcurrentUpdateError
from app.services import image as image_module
from app.services.image import ImageService
from app.utils.exceptions import (
    BadRequestError,
    ConflictError,
    FileSizeExceededError,
    InsufficientPermissionsError,
    NotFoundError,
    ResourceLimitExceededError,
    UnsupportedFileTypeError,
)
from app.utils.file_utils import FileValidator, FileStorage
from tests.conftest import API_PREFIX
from tests.factories import PropertyFactory, auth_headers, image_bytes


def make_upload(content: bytes, content_type: str = "image/png", filename: str = "photo.png") -> UploadFile:
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type})
    )


class TestFileValidator:
    """Test upload validation."""

    @pytest.mark.asyncio
    async def test_valid_png(self):
        content, ext = await FileValidator.read_upload(make_upload(image_bytes("PNG")), 1024 * 1024)
        assert ext == "png"
        assert content.startswith(b"\x89PNG")

    @pytest.mark.asyncio
    async def test_valid_jpeg_and_webp(self):
        _, jpg = await FileValidator.read_upload(
            make_upload(image_bytes("JPEG"), "image/jpeg", "a.jpg"), 1024 * 1024
        )
        _, webp = await FileValidator.read_upload(
            make_upload(image_bytes("WEBP"), "image/webp", "a.webp"), 1024 * 1024
        )
        assert (jpg, webp) == ("jpg", "webp")

    @pytest.mark.asyncio
    async def test_disallowed_type(self):
        with pytest.raises(UnsupportedFileTypeError):
            await FileValidator.read_upload(make_upload(b"GIF89a", "image/gif", "a.gif"), 1024)

    @pytest.mark.asyncio
    async def test_too_large(self):
        content = image_bytes("PNG", size=(64, 64))
        with pytest.raises(FileSizeExceededError):
            await FileValidator.read_upload(make_upload(content), len(content) - 1)

    @pytest.mark.asyncio
    async def test_empty_file(self):
        with pytest.raises(BadRequestError):
            await FileValidator.read_upload(make_upload(b""), 1024)

    @pytest.mark.asyncio
    async def test_not_an_image(self):
        with pytest.raises(BadRequestError):
            await FileValidator.read_upload(make_upload(b"definitely not a png"), 1024)

    @pytest.mark.asyncio
    async def test_declared_type_must_match_content(self):
        with pytest.raises(BadRequestError):
            await FileValidator.read_upload(make_upload(image_bytes("PNG"), "image/jpeg"), 1024 * 1024)


class TestFileStorage:
    """Test local file storage."""

    @pytest.mark.asyncio
    async def test_save_and_delete(self, file_storage):
        url = await file_storage.save("properties/a/b.png", b"data")

        assert url == "/media/properties/a/b.png"
        assert file_storage.path_for("properties/a/b.png").read_bytes() == b"data"
        assert file_storage.delete_url(url) is True
        assert file_storage.delete_url(url) is False

    def test_foreign_urls_are_not_ours(self, file_storage):
        assert file_storage.key_from_url("https://cdn.example.com/x.png") is None
        assert file_storage.key_from_url("/media/../secrets.txt") is None
        assert file_storage.key_from_url("/media/avatars/1/a.png") == "avatars/1/a.png"

    def test_generated_keys_are_unique(self):
        keys = {FileStorage.generate_key("properties/x", "png") for _ in range(50)}
        assert len(keys) == 50
        assert all(key.startswith("properties/x/") and key.endswith(".png") for key in keys)


class TestImageService:
    """Test listing image uploads and removal."""

    @pytest.mark.asyncio
    async def test_upload_appends_in_order(self, image_service, property_repository, test_owner):
        property_obj = await PropertyFactory.create_property(
            property_repository, test_owner.id, images=["/media/existing.png"]
        )

        images, uploaded = await image_service.upload_property_images(
            property_obj.id, [make_upload(image_bytes()), make_upload(image_bytes("JPEG"), "image/jpeg")], test_owner
        )

        assert len(uploaded) == 2
        assert images == ["/media/existing.png"] + uploaded
        assert uploaded[0].endswith(".png")
        assert uploaded[1].endswith(".jpg")
        assert all(f"/properties/{test_owner.id}/{property_obj.id}/" in url for url in uploaded)

        stored = await property_repository.get_by_id(property_obj.id)
        assert stored.images == images
        assert stored.images_version == 1

    @pytest.mark.asyncio
    async def test_upload_writes_files(self, image_service, property_repository, file_storage, test_owner):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        _, uploaded = await image_service.upload_property_images(
            property_obj.id, [make_upload(image_bytes())], test_owner
        )

        assert file_storage.path_for(file_storage.key_from_url(uploaded[0])).exists()

    @pytest.mark.asyncio
    async def test_no_files(self, image_service, property_repository, test_owner):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        with pytest.raises(BadRequestError):
            await image_service.upload_property_images(property_obj.id, [], test_owner)

    @pytest.mark.asyncio
    async def test_limit_of_ten(self, image_service, property_repository, test_owner):
        """A listing holds at most ten images; an upload that would exceed it stores nothing."""
        existing = [f"/media/old{i}.png" for i in range(9)]
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id, images=existing)

        with pytest.raises(ResourceLimitExceededError):
            await image_service.upload_property_images(
                property_obj.id, [make_upload(image_bytes()), make_upload(image_bytes())], test_owner
            )

        stored = await property_repository.get_by_id(property_obj.id)
        assert stored.images == existing

        images, _ = await image_service.upload_property_images(
            property_obj.id, [make_upload(image_bytes())], test_owner
        )
        assert len(images) == 10

    @pytest.mark.asyncio
    async def test_invalid_file_rejects_whole_batch(self, image_service, property_repository, file_storage, test_owner):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        with pytest.raises(BadRequestError):
            await image_service.upload_property_images(
                property_obj.id, [make_upload(image_bytes()), make_upload(b"junk")], test_owner
            )

        stored = await property_repository.get_by_id(property_obj.id)
        assert stored.images == []
        assert not any(path.is_file() for path in file_storage.base_dir.rglob("*"))

    @pytest.mark.asyncio
    async def test_only_owner_can_upload(self, image_service, property_repository, test_owner, test_admin):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        with pytest.raises(InsufficientPermissionsError):
            await image_service.upload_property_images(property_obj.id, [make_upload(image_bytes())], test_admin)

    @pytest.mark.asyncio
    async def test_upload_to_missing_listing(self, image_service, test_owner):
        with pytest.raises(NotFoundError):
            await image_service.upload_property_images(uuid.uuid4(), [make_upload(image_bytes())], test_owner)

    @pytest.mark.asyncio
    async def test_delete_image(self, image_service, property_repository, file_storage, test_owner):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)
        images, uploaded = await image_service.upload_property_images(
            property_obj.id, [make_upload(image_bytes()), make_upload(image_bytes())], test_owner
        )

        remaining = await image_service.delete_property_image(property_obj.id, uploaded[0], test_owner)

        assert remaining == [uploaded[1]]
        assert not file_storage.path_for(file_storage.key_from_url(uploaded[0])).exists()
        assert file_storage.path_for(file_storage.key_from_url(uploaded[1])).exists()

    @pytest.mark.asyncio
    async def test_delete_unlisted_url_keeps_file(self, image_service, property_repository, file_storage, test_owner, other_owner):
        """Removing a URL that is not on the listing leaves storage alone."""
        foreign = await file_storage.save("properties/other/keep.png", b"data")
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        remaining = await image_service.delete_property_image(property_obj.id, foreign, test_owner)

        assert remaining == []
        assert file_storage.path_for("properties/other/keep.png").exists()

    @pytest.mark.asyncio
    async def test_conflict_discards_stored_files(self, image_service, property_repository, file_storage, test_owner, monkeypatch):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        async def always_conflict(property_id, mutate):
            raise ConcurrentUpdateError("busy")

        monkeypatch.setattr(image_service.property_repo, "update_images", always_conflict)

        with pytest.raises(ConflictError):
            await image_service.upload_property_images(property_obj.id, [make_upload(image_bytes())], test_owner)

        assert not any(path.is_file() for path in file_storage.base_dir.rglob("*"))


class TestUploadBound:
    """Test that the upload limit is shared by every request."""

    @pytest.mark.asyncio
    async def test_services_share_one_semaphore(self, db_session, file_storage):
        first = ImageService(db_session, file_storage)
        second = ImageService(db_session, FileStorage(file_storage.base_dir, "/media"))

        assert first.upload_slots is second.upload_slots

    @pytest.mark.asyncio
    async def test_explicit_semaphore_wins(self, db_session, file_storage):
        slots = asyncio.Semaphore(1)
        assert ImageService(db_session, file_storage, upload_slots=slots).upload_slots is slots

    @pytest.mark.asyncio
    async def test_limit_holds_across_services(self, db_session, file_storage, monkeypatch):
        monkeypatch.setattr(image_module.settings, "max_concurrent_uploads", 2)
        monkeypatch.setattr(image_module, "_upload_slots", None)
        active = 0
        peak = 0

        async def slow_save(key, content):
            nonlocal active, peak
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0.01)
            active -= 1
            return f"/media/{key}"

        monkeypatch.setattr(file_storage, "save", slow_save)
        services = [ImageService(db_session, file_storage) for _ in range(4)]

        urls = await asyncio.gather(*(
            service._store(f"properties/{index}.png", b"png") for index, service in enumerate(services)
        ))

        assert len(urls) == 4
        assert peak == 2


class TestAtomicImageUpdates:
    """Test the compare-and-set update of a listing's image list."""

    @pytest.mark.asyncio
    async def test_retries_after_concurrent_write(self, property_repository, db_session, test_owner, monkeypatch):
        """A write that lands between read and update is kept, and the update is retried."""
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)
        original_get = property_repository.get_by_id
        calls = {"reads": 0, "mutations": 0}

        async def racing_get(property_id):
            current = await original_get(property_id)
            calls["reads"] += 1
            if calls["reads"] == 1:
                # Another writer appends after our read
                await db_session.execute(
                    update(Property)
                    .where(Property.id == property_id)
                    .values(images=["/media/theirs.png"], images_version=Property.images_version + 1)
                    .execution_options(synchronize_session=False)
                )
                await db_session.commit()
            return current

        monkeypatch.setattr(property_repository, "get_by_id", racing_get)

        def append(images):
            calls["mutations"] += 1
            return images + ["/media/mine.png"]

        images = await property_repository.update_images(property_obj.id, append)

        assert images == ["/media/theirs.png", "/media/mine.png"]
        assert calls["mutations"] == 2
        monkeypatch.undo()
        stored = await property_repository.get_by_id(property_obj.id)
        assert stored.images == images
        assert stored.images_version == 2

    @pytest.mark.asyncio
    async def test_gives_up_after_repeated_conflicts(self, property_repository, db_session, test_owner, monkeypatch):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)
        original_get = property_repository.get_by_id

        async def always_racing_get(property_id):
            current = await original_get(property_id)
            await db_session.execute(
                update(Property)
                .where(Property.id == property_id)
                .values(images_version=Property.images_version + 1)
                .execution_options(synchronize_session=False)
            )
            await db_session.commit()
            return current

        monkeypatch.setattr(property_repository, "get_by_id", always_racing_get)

        with pytest.raises(ConcurrentUpdateError):
            await property_repository.update_images(property_obj.id, lambda images: images + ["/media/x.png"])

        monkeypatch.undo()
        stored = await property_repository.get_by_id(property_obj.id)
        assert stored.images == []
        assert stored.images_version == IMAGE_UPDATE_ATTEMPTS

    @pytest.mark.asyncio
    async def test_missing_listing(self, property_repository):
        assert await property_repository.update_images(uuid.uuid4(), lambda images: images) is None


class TestImageAPI:
    """Test image endpoints over HTTP."""

    @pytest.mark.asyncio
    async def test_upload_and_delete(self, client, property_repository, test_owner):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)
        url = f"{API_PREFIX}/properties/{property_obj.id}/images"

        response = await client.post(
            url,
            files=[
                ("files", ("front.png", image_bytes(), "image/png")),
                ("files", ("back.jpg", image_bytes("JPEG"), "image/jpeg")),
            ],
            headers=auth_headers(test_owner)
        )
        assert response.status_code == 201
        body = response.json()
        assert len(body["uploaded"]) == 2
        assert body["images"] == body["uploaded"]

        response = await client.request(
            "DELETE", url, json={"imageUrl": body["uploaded"][0]}, headers=auth_headers(test_owner)
        )
        assert response.status_code == 200
        assert response.json()["images"] == body["uploaded"][1:]

    @pytest.mark.asyncio
    async def test_upload_without_files(self, client, property_repository, test_owner):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        response = await client.post(
            f"{API_PREFIX}/properties/{property_obj.id}/images",
            data={"note": "nothing attached"},
            headers=auth_headers(test_owner)
        )

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "No files provided"

    @pytest.mark.asyncio
    async def test_upload_wrong_type(self, client, property_repository, test_owner):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        response = await client.post(
            f"{API_PREFIX}/properties/{property_obj.id}/images",
            files=[("files", ("anim.gif", b"GIF89a....", "image/gif"))],
            headers=auth_headers(test_owner)
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_upload_by_non_owner(self, client, property_repository, test_owner, other_owner):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        response = await client.post(
            f"{API_PREFIX}/properties/{property_obj.id}/images",
            files=[("files", ("a.png", image_bytes(), "image/png"))],
            headers=auth_headers(other_owner)
        )

        assert response.status_code == 403


class TestAvatar:
    """Test avatar uploads."""

    @pytest.mark.asyncio
    async def test_avatar_replaces_previous(self, image_service, file_storage, test_buyer):
        first = await image_service.upload_avatar(make_upload(image_bytes()), test_buyer)
        first_url = first.avatar_url
        assert first_url.startswith(f"/media/avatars/{test_buyer.id}/")

        second = await image_service.upload_avatar(make_upload(image_bytes("JPEG"), "image/jpeg"), test_buyer)

        assert second.avatar_url != first_url
        assert not file_storage.path_for(file_storage.key_from_url(first_url)).exists()
        assert file_storage.path_for(file_storage.key_from_url(second.avatar_url)).exists()

    @pytest.mark.asyncio
    async def test_avatar_requires_file(self, image_service, test_buyer):
        with pytest.raises(BadRequestError):
            await image_service.upload_avatar(None, test_buyer)

    @pytest.mark.asyncio
    async def test_avatar_api(self, client, test_buyer):
        response = await client.post(
            f"{API_PREFIX}/users/me/avatar",
            files={"file": ("me.png", image_bytes(), "image/png")},
            headers=auth_headers(test_buyer)
        )

        assert response.status_code == 200
        assert response.json()["avatar_url"].startswith("/media/avatars/")
