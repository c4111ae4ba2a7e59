"""
Tests for profile validation and updates.
"""

import pytest


class TestProfileUpdate:
    """Tests for the ProfileUpdate schema."""

    @pytest.mark.parametrize(
        "raw, expected",
        [("664 123 4567", "6641234567"), ("+52 664-123-4567", "+526641234567"), ("", None)],
    )
    def test_phone_normalized(self, raw, expected):
        from app.schemas.user import ProfileUpdate

        assert ProfileUpdate(phone=raw).phone == expected

    @pytest.mark.parametrize("raw", ["12345", "abcdefghij", "+1 664 123 4567"])
    def test_invalid_phone(self, raw):
        from pydantic import ValidationError

        from app.schemas.user import ProfileUpdate

        with pytest.raises(ValidationError):
            ProfileUpdate(phone=raw)

    def test_short_name_rejected(self):
        from pydantic import ValidationError

        from app.schemas.user import ProfileUpdate

        with pytest.raises(ValidationError):
            ProfileUpdate(full_name=" A ")

    def test_role_is_not_editable(self):
        from app.schemas.user import ProfileUpdate

        assert "role" not in ProfileUpdate.model_fields
        assert "is_active" not in ProfileUpdate.model_fields


class TestUpdateProfile:
    """Tests for user_service.update_profile."""

    @pytest.mark.asyncio
    async def test_only_sent_fields_change(self, mock_async_session, user_factory):
        from app.schemas.user import ProfileUpdate
        from app.services.user_service import update_profile

        user = user_factory(full_name="Ana", bio="Antes")

        await update_profile(user, ProfileUpdate(phone="6641234567"), mock_async_session)

        assert user.phone == "6641234567"
        assert user.full_name == "Ana"
        assert user.bio == "Antes"

    @pytest.mark.asyncio
    async def test_null_name_is_ignored(self, mock_async_session, user_factory):
        from app.schemas.user import ProfileUpdate
        from app.services.user_service import update_profile

        user = user_factory(full_name="Ana")

        await update_profile(user, ProfileUpdate(full_name=None, bio=""), mock_async_session)

        assert user.full_name == "Ana"
        assert user.bio is None


class TestUploadSchema:
    """Tests for UploadResponse."""

    def test_size_label(self):
        import uuid
        from datetime import datetime, timezone

        from app.schemas.upload import UploadResponse

        response = UploadResponse(
            id=uuid.uuid4(),
            name="foto.png",
            category="general",
            content_type="image/png",
            size=2048,
            created_at=datetime.now(timezone.utc),
        )

        assert response.model_dump()["size_label"] == "2.0 KB"
