"""
Tests for the built-in signature set.

The block/allow lists below are the anchoring regression set: every allowed
path is a legitimate route that a wrongly anchored signature would catch.
"""

import pytest

from honeypot.checks.signatures import (
    Anchoring,
    ProbeFamily,
    BUILTIN_SIGNATURES,
    builtin_signatures,
    compose,
    decide,
)


RULES = compose(builtin_signatures())


class TestBuiltinSet:
    """Test the shape of the built-in list."""

    def test_builtin_list_is_stable(self):
        """Test that the accessor returns the same immutable tuple."""
        assert builtin_signatures() is BUILTIN_SIGNATURES
        assert isinstance(BUILTIN_SIGNATURES, tuple)

    def test_sources_are_unique(self):
        sources = [sig.pattern for sig in BUILTIN_SIGNATURES]
        assert len(sources) == len(set(sources))

    def test_every_builtin_declares_a_family(self):
        assert all(sig.family is not ProbeFamily.CUSTOM for sig in BUILTIN_SIGNATURES)
        assert all(sig.description for sig in BUILTIN_SIGNATURES)

    def test_declared_anchoring_matches_shape(self):
        for sig in BUILTIN_SIGNATURES:
            assert Anchoring.of(sig.pattern) is sig.anchoring, sig.pattern

    def test_year_folder_is_exact(self):
        year = next(sig for sig in BUILTIN_SIGNATURES if sig.family is ProbeFamily.DISCOVERY and "0-9" in sig.pattern)
        assert year.anchoring is Anchoring.EXACT


@pytest.mark.parametrize(
    "path",
    [
        # WordPress
        "/wp-admin",
        "/wp-login.php",
        "/wp",
        "/wordpress/install",
        "/wp-includes/js/jquery.js",
        "/wp-content/uploads/image.png",
        "/foo/wp-admin/index.php",
        "/wlwmanifest.xml",
        # PHP and shells
        "/config.php",
        "/index.php",
        "/vendor/phpunit/src/Util/PHP/eval-stdin.php",
        "/ALFA_DATA",
        "/c99.php",
        "/shell.php",
        "/shell",
        # Admin panels
        "/admin",
        "/admin.php",
        "/administrator/index",
        "/phpmyadmin",
        "/cgi-bin/luci",
        "/admin/uploads",
        "/admin/upload",
        "/admin/images",
        "/admin/editor",
        "/admin/fckeditor",
        "/admin/controller",
        # CMS
        "/admin/fckeditor/editor/filemanager",
        "/sites/default/files",
        "/images/stories",
        "/modules/mod_simplefileupload/elements",
        "/admin/controller/extension/extension",
        "/modules",
        "/plugins",
        "/components",
        "/system",
        "/template",
        "/include",
        "/includes",
        "/vendor",
        "/local",
        "/php",
        "/public",
        "/typo3",
        "/magento/downloader",
        # Upload directories
        "/uploads",
        "/upload",
        "/images",
        "/assets",
        "/files",
        "/media",
        # Sensitive and config files
        "/.env",
        "/app/.env.production",
        "/.git/config",
        "/.well-known/security.txt",
        "/static/node_modules/lodash",
        "/config.json",
        "/settings.yml",
        "/secrets.env",
        "/appsettings.json",
        "/application.properties",
        "/env.js",
        "/_env",
        "/config/secrets.env",
        # Backup files
        "/index.php.bak",
        "/database.sql.old",
        "/config.backup",
        "/app.js.orig",
        "/file.swp",
        "/backup.zip",
        "/bak",
        "/dump.sql",
        "/db_backup",
        "/sql/admin",
        # Server info and docs
        "/server-status",
        "/server-info",
        "/info",
        "/swagger.json",
        "/swagger.yml",
        "/api/swagger.json",
        # Auth
        "/login",
        "/signin",
        "/register",
        "/signup",
        "/dashboard",
        "/user/login",
        # Discovery
        "/blog",
        "/old",
        "/old-site",
        "/test",
        "/shop",
        "/2017",
        "/2024",
    ],
)
def test_known_probes_are_blocked(path):
    assert decide(path, RULES).blocked


@pytest.mark.parametrize(
    "path",
    [
        "/",
        "/api/admin",
        "/blogs",
        "/abcd",
        "/12345",
        "/api/config.json",
        "/api/wordpress-integration",
        "/api/wp-hooks",
        "/api/docs/swagger",
        "/api/openapi.json",
        "/api/uploads",
        "/api/images",
        "/api/modules",
        "/api/backup-service",
        "/api/users/login",
        "/main.js",
        "/static/app.js",
        "/health",
    ],
)
def test_legitimate_routes_are_allowed(path):
    assert decide(path, RULES).allowed


@pytest.mark.parametrize("path", ["/admin\n", "/blog\n", "/index.php\n"])
def test_trailing_newline_still_matches_end_anchor(path):
    assert decide(path, RULES).blocked
