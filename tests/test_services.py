"""
Unit tests for the service layer.
Covers authentication, listing visibility and ownership, enquiries,
saved listings, admin operations and seeding.
"""

import uuid
from datetime import date, timedelta
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from app.models.user import UserRole
from app.models.property import PropertyType, ListingType, PropertyStatus
from app.models.enquiry import EnquiryStatus
from app.schemas.user import UserRegister, ProfileUpdate
from app.schemas.property import PropertyCreate, PropertyUpdate, PropertySearchParams, MapSearchParams
from app.schemas.enquiry import EnquiryCreate
from app.seed import OTTAWA_PROPERTIES
from app.utils.auth import create_refresh_token, verify_token, create_access_token
from app.utils.exceptions import (
    BadRequestError,
    ConflictError,
    DuplicateResourceError,
    InactiveUserError,
    InsufficientPermissionsError,
    InvalidCredentialsError,
    InvalidStatusTransitionError,
    InvalidTokenError,
    NotFoundError,
    TokenExpiredError,
)
from tests.factories import UserFactory, PropertyFactory, TEST_PASSWORD


class TestAuthService:
    """Test authentication service."""

    @pytest.mark.asyncio
    async def test_register_user(self, auth_service):
        user = await auth_service.register(UserRegister(
            email="New.Owner@Example.com",
            password=TEST_PASSWORD,
            full_name="  New Owner  ",
            role=UserRole.OWNER
        ))

        assert user.email == "new.owner@example.com"
        assert user.full_name == "New Owner"
        assert user.role == UserRole.OWNER
        assert user.hashed_password != TEST_PASSWORD
        assert user.verify_password(TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, auth_service, test_buyer):
        with pytest.raises(DuplicateResourceError):
            await auth_service.register(UserRegister(
                email=test_buyer.email, password=TEST_PASSWORD, full_name="Again"
            ))

    def test_register_rejects_admin_role(self):
        """Admin accounts cannot be self-registered."""
        with pytest.raises(ValueError):
            UserRegister(email="a@example.com", password=TEST_PASSWORD, full_name="A", role=UserRole.ADMIN)

    @pytest.mark.asyncio
    async def test_login_returns_valid_tokens(self, auth_service, test_owner):
        user, access_token, refresh_token = await auth_service.login(test_owner.email, TEST_PASSWORD)

        assert user.id == test_owner.id
        access = verify_token(access_token, "access")
        assert access.user_id == str(test_owner.id)
        assert access.role == UserRole.OWNER.value
        refresh = verify_token(refresh_token, "refresh")
        assert refresh.user_id == str(test_owner.id)

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, auth_service, test_owner):
        with pytest.raises(InvalidCredentialsError):
            await auth_service.login(test_owner.email, "wrongpassword")

    @pytest.mark.asyncio
    async def test_login_unknown_email(self, auth_service):
        with pytest.raises(InvalidCredentialsError):
            await auth_service.login("nobody@example.com", TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_login_inactive_user(self, auth_service, user_repository):
        user = await UserFactory.create_user(user_repository, is_active=False)
        with pytest.raises(InactiveUserError):
            await auth_service.login(user.email, TEST_PASSWORD)

    @pytest.mark.asyncio
    async def test_refresh_access_token(self, auth_service, test_buyer):
        refresh_token = create_refresh_token(test_buyer.id, test_buyer.email)

        access_token = await auth_service.refresh_access_token(refresh_token)

        assert verify_token(access_token, "access").user_id == str(test_buyer.id)

    @pytest.mark.asyncio
    async def test_access_token_cannot_refresh(self, auth_service, test_buyer):
        access_token = create_access_token(test_buyer.id, test_buyer.email, test_buyer.role)
        with pytest.raises(InvalidTokenError):
            await auth_service.refresh_access_token(access_token)

    @pytest.mark.asyncio
    async def test_expired_token(self, auth_service, test_buyer):
        token = create_access_token(
            test_buyer.id, test_buyer.email, test_buyer.role, expires_delta=timedelta(seconds=-10)
        )
        with pytest.raises(TokenExpiredError):
            await auth_service.get_current_user(token)

    @pytest.mark.asyncio
    async def test_token_for_deleted_user(self, auth_service):
        token = create_access_token(uuid.uuid4(), "ghost@example.com", UserRole.BUYER)
        with pytest.raises(InvalidTokenError):
            await auth_service.get_current_user(token)

    @pytest.mark.asyncio
    async def test_update_profile(self, auth_service, test_buyer):
        updated = await auth_service.update_profile(
            test_buyer, ProfileUpdate(phone="613-555-0100", bio="Looking in Ottawa")
        )

        assert updated.phone == "613-555-0100"
        assert updated.bio == "Looking in Ottawa"
        assert updated.full_name == "Test Buyer"


class TestPropertyService:
    """Test listing visibility, ownership and CRUD."""

    def _create_payload(self, **overrides) -> PropertyCreate:
        data = dict(
            title="New Listing",
            property_type=PropertyType.CONDO,
            listing_type=ListingType.RENT,
            price=Decimal("2100"),
            address="1 Elgin Street",
            city="Ottawa",
            state="Ontario",
            amenities=["Gym", " Gym ", "Pool"],
        )
        data.update(overrides)
        return PropertyCreate(**data)

    @pytest.mark.asyncio
    async def test_owner_creates_listing(self, property_service, test_owner):
        property_obj = await property_service.create_property(self._create_payload(), test_owner)

        assert property_obj.owner_id == test_owner.id
        assert property_obj.status == PropertyStatus.DRAFT
        assert property_obj.amenities == ["Gym", "Pool"]
        assert property_obj.images == []
        assert property_obj.owner.full_name == "Test Owner"

    @pytest.mark.asyncio
    async def test_buyer_cannot_create_listing(self, property_service, test_buyer):
        with pytest.raises(InsufficientPermissionsError):
            await property_service.create_property(self._create_payload(), test_buyer)

    @pytest.mark.asyncio
    async def test_draft_hidden_from_public(self, property_service, property_repository, test_owner, test_buyer, test_admin):
        """Non-active listings are visible to their owner and admins only."""
        draft = await PropertyFactory.create_property(
            property_repository, test_owner.id, status=PropertyStatus.DRAFT
        )

        with pytest.raises(NotFoundError):
            await property_service.get_property(draft.id)
        with pytest.raises(NotFoundError):
            await property_service.get_property(draft.id, test_buyer)

        assert (await property_service.get_property(draft.id, test_owner)).id == draft.id
        assert (await property_service.get_property(draft.id, test_admin)).id == draft.id

    @pytest.mark.asyncio
    async def test_get_missing_property(self, property_service):
        with pytest.raises(NotFoundError):
            await property_service.get_property(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_update_by_owner(self, property_service, property_repository, test_owner):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        updated = await property_service.update_property(
            property_obj.id, PropertyUpdate(price=Decimal("450000"), status=PropertyStatus.SOLD), test_owner
        )

        assert updated.price == Decimal("450000")
        assert updated.status == PropertyStatus.SOLD
        assert updated.title == property_obj.title

    @pytest.mark.asyncio
    async def test_update_ignores_non_whitelisted_fields(self, property_service, property_repository, test_owner, other_owner):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        payload = PropertyUpdate(**{"title": "Renamed", "owner_id": str(other_owner.id), "images_version": 99})
        updated = await property_service.update_property(property_obj.id, payload, test_owner)

        assert updated.title == "Renamed"
        assert updated.owner_id == test_owner.id
        assert updated.images_version == 0

    @pytest.mark.asyncio
    async def test_writing_images_bumps_version(self, property_service, property_repository, test_owner):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        updated = await property_service.update_property(
            property_obj.id, PropertyUpdate(images=["/media/a.jpg"]), test_owner
        )

        assert updated.images == ["/media/a.jpg"]
        assert updated.images_version == 1

    @pytest.mark.asyncio
    async def test_images_write_rejected_after_concurrent_upload(
        self, property_service, property_repository, test_owner, monkeypatch
    ):
        """An upload landing between the read and the write is never overwritten."""
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)
        read_listing = property_service.get_managed_property

        async def read_then_upload(property_id, user, action):
            listing = await read_listing(property_id, user, action)
            await property_repository.update_images(property_id, lambda images: images + ["/media/concurrent.jpg"])
            return listing

        monkeypatch.setattr(property_service, "get_managed_property", read_then_upload)

        with pytest.raises(ConflictError):
            await property_service.update_property(
                property_obj.id, PropertyUpdate(images=["/media/patched.jpg"], title="Renamed"), test_owner
            )

        stored = await property_repository.get_by_id(property_obj.id)
        assert stored.images == ["/media/concurrent.jpg"]
        assert stored.images_version == 1
        assert stored.title == property_obj.title

    def test_update_rejects_null_required_field(self):
        with pytest.raises(ValueError):
            PropertyUpdate(title=None)

    @pytest.mark.asyncio
    async def test_update_by_other_owner_forbidden(self, property_service, property_repository, test_owner, other_owner):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        with pytest.raises(InsufficientPermissionsError):
            await property_service.update_property(property_obj.id, PropertyUpdate(title="Mine now"), other_owner)

    @pytest.mark.asyncio
    async def test_admin_can_update_any_listing(self, property_service, property_repository, test_owner, test_admin):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        updated = await property_service.update_property(
            property_obj.id, PropertyUpdate(status=PropertyStatus.DRAFT), test_admin
        )

        assert updated.status == PropertyStatus.DRAFT

    @pytest.mark.asyncio
    async def test_delete_removes_listing_and_files(
        self, property_service, property_repository, file_storage, test_owner
    ):
        url = await file_storage.save("properties/x/photo.jpg", b"bytes")
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id, images=[url])

        await property_service.delete_property(property_obj.id, test_owner)

        assert not await property_repository.exists(property_obj.id)
        assert not file_storage.path_for("properties/x/photo.jpg").exists()

    @pytest.mark.asyncio
    async def test_failed_delete_keeps_files(
        self, property_service, property_repository, file_storage, test_owner, monkeypatch
    ):
        url = await file_storage.save("properties/x/kept.jpg", b"bytes")
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id, images=[url])

        async def failing_delete(property_id):
            raise OperationalError("DELETE FROM properties", {}, Exception("connection reset"))

        monkeypatch.setattr(property_service.property_repo, "delete_property", failing_delete)

        with pytest.raises(OperationalError):
            await property_service.delete_property(property_obj.id, test_owner)

        assert await property_repository.exists(property_obj.id)
        assert file_storage.path_for("properties/x/kept.jpg").exists()

    @pytest.mark.asyncio
    async def test_delete_by_buyer_forbidden(self, property_service, property_repository, test_owner, test_buyer):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        with pytest.raises(InsufficientPermissionsError):
            await property_service.delete_property(property_obj.id, test_buyer)

    @pytest.mark.asyncio
    async def test_list_mine_is_role_scoped(
        self, property_service, property_repository, test_owner, other_owner, test_buyer, test_admin
    ):
        """Owners see their own listings in every status, admins all, buyers none."""
        await PropertyFactory.create_property(property_repository, test_owner.id, title="Mine active")
        await PropertyFactory.create_property(
            property_repository, test_owner.id, title="Mine draft", status=PropertyStatus.DRAFT
        )
        await PropertyFactory.create_property(property_repository, other_owner.id, title="Theirs")

        mine, total = await property_service.list_mine(test_owner, 1, 12)
        assert sorted(p.title for p in mine) == ["Mine active", "Mine draft"]
        assert total == 2

        _, admin_total = await property_service.list_mine(test_admin, 1, 12)
        assert admin_total == 3

        buyer_list, buyer_total = await property_service.list_mine(test_buyer, 1, 12)
        assert buyer_list == []
        assert buyer_total == 0

    @pytest.mark.asyncio
    async def test_search_returns_page_and_total(self, property_service, property_repository, test_owner):
        await PropertyFactory.create_batch(property_repository, test_owner.id, 15)

        properties, total = await property_service.search_properties(PropertySearchParams(page=2, limit=10))

        assert total == 15
        assert len(properties) == 5

    @pytest.mark.asyncio
    async def test_featured_ignores_filters_and_is_capped(self, property_service, property_repository, test_owner):
        created = await PropertyFactory.create_batch(property_repository, test_owner.id, 30)

        featured = await property_service.get_featured(3)
        assert [p.id for p in featured] == [p.id for p in reversed(created[-3:])]

        assert len(await property_service.get_featured(100)) == 24

    @pytest.mark.asyncio
    async def test_map_search_only_returns_mapped_listings(self, property_service, property_repository, test_owner):
        await PropertyFactory.create_property(property_repository, test_owner.id, title="Glebe", latitude=45.40, longitude=-75.69)
        await PropertyFactory.create_property(property_repository, test_owner.id, title="Kanata", latitude=45.30, longitude=-75.91)

        properties, total = await property_service.map_search(
            MapSearchParams(north=45.45, south=45.35, east=-75.60, west=-75.80)
        )

        assert [p.title for p in properties] == ["Glebe"]
        assert total == 1


class TestEnquiryService:
    """Test enquiry creation, role-scoped lists and the status lifecycle."""

    async def _enquiry(self, enquiry_service, property_obj, sender, message="Is it still available?"):
        return await enquiry_service.create_enquiry(
            EnquiryCreate(property_id=property_obj.id, message=message, preferred_date=date(2026, 11, 1)),
            sender
        )

    @pytest.mark.asyncio
    async def test_create_enquiry(self, enquiry_service, property_repository, test_owner, test_buyer):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        enquiry = await self._enquiry(enquiry_service, property_obj, test_buyer)

        assert enquiry.status == EnquiryStatus.UNREAD
        assert enquiry.owner_id == test_owner.id
        assert enquiry.sender_id == test_buyer.id
        assert enquiry.property.title == property_obj.title
        assert enquiry.sender.full_name == "Test Buyer"

    @pytest.mark.asyncio
    async def test_cannot_enquire_about_own_listing(self, enquiry_service, property_repository, test_owner):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        with pytest.raises(BadRequestError):
            await self._enquiry(enquiry_service, property_obj, test_owner)

    @pytest.mark.asyncio
    async def test_enquiry_for_missing_listing(self, enquiry_service, test_buyer):
        with pytest.raises(NotFoundError):
            await enquiry_service.create_enquiry(
                EnquiryCreate(property_id=uuid.uuid4(), message="Hello"), test_buyer
            )

    def test_blank_message_rejected(self):
        with pytest.raises(ValueError):
            EnquiryCreate(property_id=uuid.uuid4(), message="   ")

    @pytest.mark.asyncio
    async def test_lists_are_role_scoped(
        self, enquiry_service, property_repository, user_repository, test_owner, other_owner, test_buyer, test_admin
    ):
        mine = await PropertyFactory.create_property(property_repository, test_owner.id)
        theirs = await PropertyFactory.create_property(property_repository, other_owner.id)
        other_buyer = await UserFactory.create_user(user_repository, full_name="Other Buyer")

        await self._enquiry(enquiry_service, mine, test_buyer)
        await self._enquiry(enquiry_service, theirs, test_buyer)
        await self._enquiry(enquiry_service, mine, other_buyer)

        assert len(await enquiry_service.list_enquiries(test_owner)) == 2
        assert len(await enquiry_service.list_enquiries(other_owner)) == 1
        assert len(await enquiry_service.list_enquiries(test_buyer)) == 2
        assert len(await enquiry_service.list_enquiries(other_buyer)) == 1
        assert len(await enquiry_service.list_enquiries(test_admin)) == 3

    @pytest.mark.asyncio
    async def test_status_lifecycle(self, enquiry_service, property_repository, test_owner, test_buyer):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)
        enquiry = await self._enquiry(enquiry_service, property_obj, test_buyer)

        enquiry = await enquiry_service.update_status(enquiry.id, EnquiryStatus.READ, test_owner)
        assert enquiry.status == EnquiryStatus.READ

        enquiry = await enquiry_service.update_status(enquiry.id, EnquiryStatus.REPLIED, test_owner)
        assert enquiry.status == EnquiryStatus.REPLIED

        with pytest.raises(InvalidStatusTransitionError):
            await enquiry_service.update_status(enquiry.id, EnquiryStatus.UNREAD, test_owner)

        enquiry = await enquiry_service.update_status(enquiry.id, EnquiryStatus.ARCHIVED, test_owner)
        assert enquiry.status == EnquiryStatus.ARCHIVED

        with pytest.raises(InvalidStatusTransitionError):
            await enquiry_service.update_status(enquiry.id, EnquiryStatus.READ, test_owner)

    @pytest.mark.asyncio
    async def test_same_status_is_a_no_op(self, enquiry_service, property_repository, test_owner, test_buyer):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)
        enquiry = await self._enquiry(enquiry_service, property_obj, test_buyer)

        unchanged = await enquiry_service.update_status(enquiry.id, EnquiryStatus.UNREAD, test_owner)

        assert unchanged.status == EnquiryStatus.UNREAD

    @pytest.mark.asyncio
    async def test_sender_cannot_change_status(self, enquiry_service, property_repository, test_owner, test_buyer):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)
        enquiry = await self._enquiry(enquiry_service, property_obj, test_buyer)

        with pytest.raises(InsufficientPermissionsError):
            await enquiry_service.update_status(enquiry.id, EnquiryStatus.READ, test_buyer)

    @pytest.mark.asyncio
    async def test_admin_can_change_status(self, enquiry_service, property_repository, test_owner, test_buyer, test_admin):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)
        enquiry = await self._enquiry(enquiry_service, property_obj, test_buyer)

        updated = await enquiry_service.update_status(enquiry.id, EnquiryStatus.ARCHIVED, test_admin)

        assert updated.status == EnquiryStatus.ARCHIVED

    @pytest.mark.asyncio
    async def test_update_missing_enquiry(self, enquiry_service, test_owner):
        with pytest.raises(NotFoundError):
            await enquiry_service.update_status(uuid.uuid4(), EnquiryStatus.READ, test_owner)


class TestSavedPropertyService:
    """Test saved listings."""

    @pytest.mark.asyncio
    async def test_save_and_list(self, saved_service, property_repository, test_owner, test_buyer):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)

        saved = await saved_service.save_property(property_obj.id, test_buyer)
        listed = await saved_service.list_saved(test_buyer)

        assert saved.property_id == property_obj.id
        assert [s.property.id for s in listed] == [property_obj.id]

    @pytest.mark.asyncio
    async def test_duplicate_save_conflicts(self, saved_service, property_repository, test_owner, test_buyer):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)
        await saved_service.save_property(property_obj.id, test_buyer)

        with pytest.raises(DuplicateResourceError):
            await saved_service.save_property(property_obj.id, test_buyer)

    @pytest.mark.asyncio
    async def test_save_missing_listing(self, saved_service, test_buyer):
        with pytest.raises(NotFoundError):
            await saved_service.save_property(uuid.uuid4(), test_buyer)

    @pytest.mark.asyncio
    async def test_unsave_is_idempotent(self, saved_service, property_repository, test_owner, test_buyer):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)
        await saved_service.save_property(property_obj.id, test_buyer)

        await saved_service.unsave_property(property_obj.id, test_buyer)
        await saved_service.unsave_property(property_obj.id, test_buyer)

        assert await saved_service.list_saved(test_buyer) == []

    @pytest.mark.asyncio
    async def test_saves_are_per_user(self, saved_service, property_repository, test_owner, test_buyer, test_admin):
        property_obj = await PropertyFactory.create_property(property_repository, test_owner.id)
        await saved_service.save_property(property_obj.id, test_buyer)

        assert await saved_service.list_saved(test_admin) == []


class TestAdminService:
    """Test admin statistics, listings and roles."""

    @pytest.mark.asyncio
    async def test_stats(self, admin_service, enquiry_service, property_repository, test_owner, test_buyer, test_admin):
        active = await PropertyFactory.create_property(property_repository, test_owner.id)
        await PropertyFactory.create_property(property_repository, test_owner.id, status=PropertyStatus.DRAFT)
        await enquiry_service.create_enquiry(EnquiryCreate(property_id=active.id, message="Hi"), test_buyer)

        stats = await admin_service.get_stats()

        assert stats == {
            "total_users": 3,
            "total_listings": 2,
            "active_listings": 1,
            "total_enquiries": 1,
        }

    @pytest.mark.asyncio
    async def test_list_listings_includes_every_status(self, admin_service, property_repository, test_owner):
        await PropertyFactory.create_batch(property_repository, test_owner.id, 3, status=PropertyStatus.DRAFT)

        properties, total = await admin_service.list_listings(1, 2)

        assert total == 3
        assert [p.title for p in properties] == ["Listing 02", "Listing 01"]
        assert properties[0].owner_name == "Test Owner"

    @pytest.mark.asyncio
    async def test_update_user_role(self, admin_service, test_buyer, test_admin):
        updated = await admin_service.update_user_role(test_buyer.id, UserRole.OWNER, test_admin)
        assert updated.role == UserRole.OWNER

    @pytest.mark.asyncio
    async def test_admin_cannot_demote_self(self, admin_service, test_admin):
        with pytest.raises(BadRequestError):
            await admin_service.update_user_role(test_admin.id, UserRole.BUYER, test_admin)

    @pytest.mark.asyncio
    async def test_update_role_of_missing_user(self, admin_service, test_admin):
        with pytest.raises(NotFoundError):
            await admin_service.update_user_role(uuid.uuid4(), UserRole.OWNER, test_admin)


class TestSeedService:
    """Test seeding."""

    @pytest.mark.asyncio
    async def test_seed_curated(self, seed_service, test_owner):
        properties = await seed_service.seed_curated(test_owner)

        assert len(properties) == len(OTTAWA_PROPERTIES)
        assert all(p.owner_id == test_owner.id for p in properties)
        assert all(p.status == PropertyStatus.ACTIVE for p in properties)

    @pytest.mark.asyncio
    async def test_seed_generated(self, seed_service, property_repository, test_admin):
        properties = await seed_service.seed_generated(test_admin, 2)

        assert len(properties) == 40
        assert await property_repository.count() == 40
        assert {p.city for p in properties} == {"New York", "Los Angeles"}

    @pytest.mark.asyncio
    async def test_seed_generated_city_range(self, seed_service, test_admin):
        with pytest.raises(BadRequestError):
            await seed_service.seed_generated(test_admin, 0)
        with pytest.raises(BadRequestError):
            await seed_service.seed_generated(test_admin, 26)

    @pytest.mark.asyncio
    async def test_buyer_cannot_seed(self, seed_service, test_buyer):
        with pytest.raises(InsufficientPermissionsError):
            await seed_service.seed_curated(test_buyer)
