"""Unit tests for ReportManager against a temporary SQLite database"""

import pytest

from report_service.config.settings import settings
from report_service.core.report_manager import ReportManager
from report_service.errors import ValidationError
from report_service.models import ReportCreateRequest, ReportStatus
from tests.conftest import OTHER_VALID_IMEI, VALID_IMEI, make_submission


@pytest.fixture
def manager():
    return ReportManager()


async def create(manager, db, **overrides):
    return await manager.create_report(ReportCreateRequest(**make_submission(**overrides)), db)


@pytest.mark.unit
class TestCreateReport:

    async def test_returns_unique_refs_for_identical_input(self, manager, db_session):
        first = await create(manager, db_session)
        second = await create(manager, db_session)

        assert first.ref
        assert second.ref
        assert first.ref != second.ref

    async def test_stores_fields(self, manager, db_session):
        report = await create(manager, db_session, status="lost")

        stored = await manager.admin_list(db_session)
        assert len(stored) == 1
        assert stored[0].ref == report.ref
        assert stored[0].status == ReportStatus.LOST
        assert stored[0].contact_email == "sam@example.com"
        assert stored[0].is_public is True

    async def test_trims_and_drops_empty_fields(self, manager, db_session):
        await create(manager, db_session, brand="  Nokia ", color="   ", location="")

        [stored] = await manager.admin_list(db_session)
        assert stored.brand == "Nokia"
        assert stored.color is None
        assert stored.location is None

    async def test_numeric_free_form_values_are_kept_as_text(self, manager, db_session):
        await create(manager, db_session, police_report=12345, lost_date=20251116, contact_phone=5550100)

        [stored] = await manager.admin_list(db_session)
        assert stored.police_report == "12345"
        assert stored.lost_date == "20251116"
        assert stored.contact_phone == "5550100"

    async def test_private_by_default(self, manager, db_session):
        payload = make_submission()
        del payload["is_public"]
        await manager.create_report(ReportCreateRequest(**payload), db_session)

        [stored] = await manager.admin_list(db_session)
        assert stored.is_public is False

    async def test_recovered_is_rejected(self, manager, db_session):
        with pytest.raises(ValidationError, match="status"):
            await create(manager, db_session, status="recovered")

        assert await manager.admin_list(db_session) == []

    @pytest.mark.parametrize("status", [None, "", "LOST", "found"])
    async def test_other_statuses_are_rejected(self, manager, db_session, status):
        with pytest.raises(ValidationError):
            await create(manager, db_session, status=status)

    @pytest.mark.parametrize("imei", [None, "", "490154203237519", "49015420323751X"])
    async def test_invalid_imei_is_rejected(self, manager, db_session, imei):
        with pytest.raises(ValidationError, match="Invalid IMEI"):
            await create(manager, db_session, imei=imei)

        assert await manager.admin_list(db_session) == []


@pytest.mark.unit
class TestPublicLookup:

    async def test_returns_only_public_reports_for_imei(self, manager, db_session):
        public = await create(manager, db_session, is_public=True)
        await create(manager, db_session, is_public=False)
        await create(manager, db_session, imei=OTHER_VALID_IMEI, is_public=True)

        results = await manager.public_lookup(VALID_IMEI, db_session)

        assert [r.ref for r in results] == [public.ref]

    async def test_newest_first(self, manager, db_session):
        older = await create(manager, db_session)
        newer = await create(manager, db_session, status="lost")

        results = await manager.public_lookup(VALID_IMEI, db_session)

        assert [r.ref for r in results] == [newer.ref, older.ref]

    async def test_no_match_is_empty_list(self, manager, db_session):
        assert await manager.public_lookup(VALID_IMEI, db_session) == []

    async def test_invalid_imei_is_rejected(self, manager, db_session):
        with pytest.raises(ValidationError):
            await manager.public_lookup("123", db_session)


@pytest.mark.unit
class TestAdminList:

    async def test_includes_private_reports_newest_first(self, manager, db_session):
        first = await create(manager, db_session, is_public=False)
        second = await create(manager, db_session, imei=OTHER_VALID_IMEI)

        results = await manager.admin_list(db_session)

        assert [r.ref for r in results] == [second.ref, first.ref]

    async def test_respects_limit(self, manager, db_session):
        refs = [(await create(manager, db_session)).ref for _ in range(4)]

        results = await manager.admin_list(db_session, limit=2)

        assert [r.ref for r in results] == [refs[3], refs[2]]

    async def test_zero_limit_is_honoured(self, manager, db_session):
        await create(manager, db_session)

        assert await manager.admin_list(db_session, limit=0) == []

    async def test_default_limit_from_settings(self, manager, db_session, monkeypatch):
        monkeypatch.setattr(settings, "admin_list_limit", 1)
        await create(manager, db_session)
        newest = await create(manager, db_session)

        assert [r.ref for r in await manager.admin_list(db_session)] == [newest.ref]


@pytest.mark.unit
class TestAdminUpdate:

    async def test_status_change_is_idempotent(self, manager, db_session):
        report = await create(manager, db_session)

        assert await manager.admin_update(report.ref, {"status": "recovered"}, db_session)
        assert await manager.admin_update(report.ref, {"status": "recovered"}, db_session)

        [stored] = await manager.admin_list(db_session)
        assert stored.status == ReportStatus.RECOVERED

    async def test_recovered_can_be_reflagged(self, manager, db_session):
        report = await create(manager, db_session)
        await manager.admin_update(report.ref, {"status": "recovered"}, db_session)

        assert await manager.admin_update(report.ref, {"status": "lost"}, db_session)

        [stored] = await manager.admin_list(db_session)
        assert stored.status == ReportStatus.LOST

    async def test_visibility_accepts_bool_and_int(self, manager, db_session):
        report = await create(manager, db_session, is_public=True)

        await manager.admin_update(report.ref, {"is_public": 0}, db_session)
        assert await manager.public_lookup(VALID_IMEI, db_session) == []

        await manager.admin_update(report.ref, {"is_public": True}, db_session)
        assert len(await manager.public_lookup(VALID_IMEI, db_session)) == 1

    async def test_unknown_ref_is_not_found_and_changes_nothing(self, manager, db_session):
        report = await create(manager, db_session)

        assert not await manager.admin_update("no-such-ref", {"status": "recovered"}, db_session)

        [stored] = await manager.admin_list(db_session)
        assert stored.ref == report.ref
        assert stored.status == ReportStatus.STOLEN

    async def test_other_fields_are_dropped(self, manager, db_session):
        report = await create(manager, db_session)

        await manager.admin_update(
            report.ref,
            {"status": "recovered", "imei": OTHER_VALID_IMEI, "contact_email": "x@example.com"},
            db_session
        )

        [stored] = await manager.admin_list(db_session)
        assert stored.status == ReportStatus.RECOVERED
        assert stored.imei == VALID_IMEI
        assert stored.contact_email == "sam@example.com"

    @pytest.mark.parametrize(
        "patch",
        [{}, {"imei": OTHER_VALID_IMEI}, {"status": "found"}, {"is_public": "yes"}, {"is_public": 2}],
    )
    async def test_nothing_valid_is_rejected(self, manager, db_session, patch):
        report = await create(manager, db_session)

        with pytest.raises(ValidationError, match="No valid fields"):
            await manager.admin_update(report.ref, patch, db_session)
