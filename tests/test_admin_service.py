"""
Tests for administrator user management.
"""

import pytest


class TestFilterUserCertificates:
    """Tests for filter_user_certificates."""

    def test_default_sort_is_newest_first(self, certificate_factory):
        from app.services.admin_service import filter_user_certificates

        certificates = [
            certificate_factory(title="old", offset_days=0),
            certificate_factory(title="new", offset_days=5),
        ]

        assert [c.title for c in filter_user_certificates(certificates)] == ["new", "old"]

    def test_date_ascending_and_title_sort(self, certificate_factory):
        from app.services.admin_service import CertificateSort, filter_user_certificates

        certificates = [
            certificate_factory(title="beta", offset_days=2),
            certificate_factory(title="Alfa", offset_days=1),
            certificate_factory(title="gamma", offset_days=0),
        ]

        by_date = filter_user_certificates(certificates, sort=CertificateSort.DATE_ASC)
        by_title = filter_user_certificates(certificates, sort=CertificateSort.TITLE)

        assert [c.title for c in by_date] == ["gamma", "Alfa", "beta"]
        assert [c.title for c in by_title] == ["Alfa", "beta", "gamma"]

    def test_semester_and_search(self, certificate_factory):
        from app.models.enums import SemesterTerm
        from app.services.admin_service import filter_user_certificates

        certificates = [
            certificate_factory(title="A", file_name="taller.pdf", semester_term=SemesterTerm.JAN_JUN),
            certificate_factory(title="B", description="Un TALLER", semester_term=SemesterTerm.JUL_DEC),
            certificate_factory(title="C", semester_term=SemesterTerm.JAN_JUN),
        ]

        result = filter_user_certificates(
            certificates, semester_term=SemesterTerm.JAN_JUN, q="taller"
        )

        assert [c.title for c in result] == ["A"]


class TestUsersCsv:
    """Tests for build_users_csv."""

    def test_roles_and_status_translated(self, user_factory):
        from app.models.enums import UserRole
        from app.services.admin_service import build_users_csv

        user = user_factory(full_name="Luis", role=UserRole.ADMIN, is_active=False)

        lines = build_users_csv([user]).split("\n")

        assert lines[0].endswith('"UID","Nombre","Email","Rol","Estado"')
        assert lines[1] == f'"{user.id}","Luis","{user.email}","Administrador","Inactivo"'

    def test_no_users_still_has_headers(self):
        from app.services.admin_service import build_users_csv

        assert build_users_csv([]).endswith('"Estado"')


class TestUserActions:
    """Tests for role, activation and deletion."""

    @pytest.mark.asyncio
    async def test_toggle_active_flips_flag(self, mock_async_session, user_factory):
        from app.services.admin_service import toggle_active

        admin = user_factory()
        target = user_factory(is_active=True)

        await toggle_active(target, admin, mock_async_session)
        assert target.is_active is False

        await toggle_active(target, admin, mock_async_session)
        assert target.is_active is True
        assert mock_async_session.commit.await_count == 2

    @pytest.mark.asyncio
    async def test_admin_cannot_deactivate_self(self, mock_async_session, user_factory):
        from fastapi import HTTPException

        from app.services.admin_service import toggle_active

        admin = user_factory()

        with pytest.raises(HTTPException) as exc_info:
            await toggle_active(admin, admin, mock_async_session)

        assert exc_info.value.status_code == 400
        assert admin.is_active is True
        mock_async_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_change_role(self, mock_async_session, user_factory):
        from app.models.enums import UserRole
        from app.services.admin_service import change_role

        target = user_factory(role=UserRole.GUEST)

        await change_role(target, UserRole.FACULTY, user_factory(), mock_async_session)

        assert target.role == UserRole.FACULTY

    @pytest.mark.asyncio
    async def test_admin_cannot_demote_self(self, mock_async_session, user_factory):
        from fastapi import HTTPException

        from app.models.enums import UserRole
        from app.services.admin_service import change_role

        admin = user_factory(role=UserRole.ADMIN)

        with pytest.raises(HTTPException):
            await change_role(admin, UserRole.GUEST, admin, mock_async_session)

        assert admin.role == UserRole.ADMIN

    @pytest.mark.asyncio
    async def test_delete_user(self, mock_async_session, user_factory):
        from app.services.admin_service import delete_user

        target = user_factory()

        await delete_user(target, user_factory(), mock_async_session)

        mock_async_session.delete.assert_awaited_once_with(target)
        mock_async_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_get_user_missing_is_404(self, mock_async_session, scalar_result):
        import uuid

        from fastapi import HTTPException

        from app.services.admin_service import get_user

        mock_async_session.execute.return_value = scalar_result(None)

        with pytest.raises(HTTPException) as exc_info:
            await get_user(uuid.uuid4(), mock_async_session)

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_list_users_returns_counts(self, mock_async_session, user_factory):
        from unittest.mock import MagicMock

        from app.services.admin_service import list_users, page_count

        user = user_factory()
        count_result = MagicMock()
        count_result.scalar.return_value = 21
        rows_result = MagicMock()
        rows_result.all.return_value = [(user, 4)]
        mock_async_session.execute.side_effect = [count_result, rows_result]

        rows, total = await list_users(mock_async_session, page=2, size=20)

        assert rows == [(user, 4)]
        assert total == 21
        assert page_count(total, 20) == 2
