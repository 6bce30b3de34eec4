"""
Store-level tests for the credential store, catalog and favorite ledger,
run against a fresh in-memory database.
"""
import pytest

from marketplace.core.bootstrap import DEFAULT_TEMPLATES, ensure_template_catalog
from marketplace.core.errors import AlreadyFavorited, ConflictError, InvalidCredentials, NotFound, ValidationError
from marketplace.models import Favorite, Template
from marketplace.services import CredentialStore, FavoriteLedger, TemplateCatalog


pytestmark = pytest.mark.asyncio


@pytest.fixture
def credentials():
    return CredentialStore()


@pytest.fixture
def catalog():
    return TemplateCatalog()


@pytest.fixture
def ledger(catalog):
    return FavoriteLedger(catalog)


class TestCredentialStore:
    async def test_register_trims_and_returns_user(self, db, credentials):
        user = await credentials.register("  alice  ", "pass1")
        assert user.username == "alice"
        assert user.password == "pass1"

    async def test_username_length_boundary(self, db, credentials):
        with pytest.raises(ValidationError):
            await credentials.register(" ab ", "pass1")
        user = await credentials.register(" abc ", "pass1")
        assert user.username == "abc"

    async def test_password_length_boundary(self, db, credentials):
        with pytest.raises(ValidationError):
            await credentials.register("alice", "abc")
        await credentials.register("alice", "abcd")

    async def test_non_string_fields_rejected(self, db, credentials):
        with pytest.raises(ValidationError):
            await credentials.register(None, "pass1")
        with pytest.raises(ValidationError):
            await credentials.register("alice", None)

    async def test_duplicate_username_conflicts(self, db, credentials):
        await credentials.register("alice", "pass1")
        with pytest.raises(ConflictError):
            await credentials.register("alice", "different")
        with pytest.raises(ConflictError):
            await credentials.register(" alice", "pass1")

    async def test_authenticate(self, db, credentials):
        user = await credentials.register("alice", "pass1")
        assert (await credentials.authenticate("alice", "pass1")).id == user.id

    async def test_authenticate_failures_are_uniform(self, db, credentials):
        await credentials.register("alice", "pass1")
        with pytest.raises(InvalidCredentials) as wrong_pw:
            await credentials.authenticate("alice", "wrong")
        with pytest.raises(InvalidCredentials) as no_user:
            await credentials.authenticate("bob", "pass1")
        assert wrong_pw.value.message == no_user.value.message

    async def test_authenticate_requires_both_fields(self, db, credentials):
        with pytest.raises(ValidationError):
            await credentials.authenticate("", "pass1")
        with pytest.raises(ValidationError):
            await credentials.authenticate("alice", None)


class TestTemplateCatalog:
    async def test_seed_is_idempotent(self, db, catalog):
        assert await ensure_template_catalog(catalog) == len(DEFAULT_TEMPLATES)
        assert await ensure_template_catalog(catalog) == 0
        assert await Template.all().count() == len(DEFAULT_TEMPLATES)

    async def test_seed_skipped_when_catalog_not_empty(self, db, catalog):
        await Template.create(id="x1", name="Custom", description="", category="Misc")
        assert await catalog.seed_if_empty(DEFAULT_TEMPLATES) == 0
        assert [t.id for t in await catalog.list()] == ["x1"]

    async def test_list_keeps_seeding_order(self, db, catalog):
        records = [
            {"id": "t10", "name": "Ten", "description": "", "category": "A"},
            {"id": "t2", "name": "Two", "description": "", "category": "B"},
            {"id": "t1", "name": "One", "description": "", "category": "C"},
        ]
        await catalog.seed_if_empty(records)
        assert [t.id for t in await catalog.list()] == ["t10", "t2", "t1"]

    async def test_get_and_not_found(self, db, catalog):
        await ensure_template_catalog(catalog)
        assert (await catalog.get("t3")).name == "Blog"
        with pytest.raises(NotFound):
            await catalog.get("t404")


class TestFavoriteLedger:
    async def test_add_and_list(self, db, credentials, catalog, ledger):
        await ensure_template_catalog(catalog)
        user = await credentials.register("alice", "pass1")
        await ledger.add(user, "t2")
        await ledger.add(user, "t1")
        entries = await ledger.list_for(user)
        assert [t.id for t, _ in entries] == ["t2", "t1"]
        assert all(ts is not None for _, ts in entries)

    async def test_duplicate_rejected(self, db, credentials, catalog, ledger):
        await ensure_template_catalog(catalog)
        user = await credentials.register("alice", "pass1")
        await ledger.add(user, "t1")
        with pytest.raises(AlreadyFavorited):
            await ledger.add(user, "t1")
        assert len(await ledger.list_for(user)) == 1

    async def test_unknown_template_leaves_no_entry(self, db, credentials, catalog, ledger):
        await ensure_template_catalog(catalog)
        user = await credentials.register("alice", "pass1")
        with pytest.raises(NotFound):
            await ledger.add(user, "t404")
        assert await Favorite.all().count() == 0

    async def test_vanished_template_is_dropped(self, db, credentials, catalog, ledger):
        await ensure_template_catalog(catalog)
        user = await credentials.register("alice", "pass1")
        await ledger.add(user, "t1")
        await ledger.add(user, "t2")
        await Template.filter(id="t1").delete()
        assert [t.id for t, _ in await ledger.list_for(user)] == ["t2"]

    async def test_scoped_per_user(self, db, credentials, catalog, ledger):
        await ensure_template_catalog(catalog)
        alice = await credentials.register("alice", "pass1")
        bob = await credentials.register("bob", "pass2")
        await ledger.add(alice, "t1")
        await ledger.add(bob, "t2")
        await ledger.add(bob, "t1")
        assert [t.id for t, _ in await ledger.list_for(alice)] == ["t1"]
        assert [t.id for t, _ in await ledger.list_for(bob)] == ["t2", "t1"]


class TestUniqueConstraintFallback:
    """The database constraint still wins when the existence pre-check misses a duplicate."""

    async def test_register_integrity_error_is_conflict(self, db, credentials, monkeypatch):
        await credentials.register("alice", "pass1")

        async def _never_taken(name):
            return False

        monkeypatch.setattr(credentials, "_username_taken", _never_taken)
        with pytest.raises(ConflictError) as exc:
            await credentials.register("alice", "pass2")
        assert exc.value.message == "username already exists"

    async def test_favorite_integrity_error_is_already_favorited(self, db, credentials, catalog, ledger, monkeypatch):
        await ensure_template_catalog(catalog)
        user = await credentials.register("alice", "pass1")
        await ledger.add(user, "t1")

        async def _never_favorited(user, template_id):
            return False

        monkeypatch.setattr(ledger, "_is_favorited", _never_favorited)
        with pytest.raises(AlreadyFavorited):
            await ledger.add(user, "t1")
        assert await Favorite.all().count() == 1


class TestCredentialLimits:
    async def test_long_password_is_stored_verbatim(self, db, credentials):
        password = "x" * 1000
        user = await credentials.register("alice", password)
        assert (await credentials.authenticate("alice", password)).id == user.id

    async def test_username_over_column_width(self, db, credentials):
        with pytest.raises(ValidationError):
            await credentials.register("a" * 257, "pass1")
        assert (await credentials.register("a" * 256, "pass1")).username == "a" * 256

    async def test_whitespace_username_login_is_invalid_credentials(self, db, credentials):
        await credentials.register("alice", "pass1")
        with pytest.raises(InvalidCredentials):
            await credentials.authenticate("   ", "pass1")

    async def test_non_string_login_fields(self, db, credentials):
        with pytest.raises(ValidationError):
            await credentials.authenticate(12345, "pass1")
        with pytest.raises(ValidationError):
            await credentials.authenticate("alice", 12345)
