# ./honeypot/checks/signatures/builtin.py
"""
Built-in probe signatures.

The list is flat and ordered so that "why did this path match" can be
answered by scanning it top to bottom. Paths are normalized (runs of ``/``
collapsed) before matching, and every pattern is matched case-insensitively.

Anchoring rules:
- EXACT    ``^/admin$``  matches /admin, not /api/admin or /admin/x
- PREFIX   ``^/wp-``     matches /wp-admin, not /api/wp-admin
- SUFFIX   ``\\.php$``    matches any path ending in .php
- ANYWHERE ``/\\.git``    matches at any nesting depth (use carefully)

A trailing ``$`` also matches before a final newline, so ``/admin%0A`` is blocked too.
"""

from typing import Tuple

from .signature import Anchoring, ProbeFamily, Signature

EXACT = Anchoring.EXACT
PREFIX = Anchoring.PREFIX
SUFFIX = Anchoring.SUFFIX
ANYWHERE = Anchoring.ANYWHERE


def _family(family: ProbeFamily, *rows) -> Tuple[Signature, ...]:
    return tuple(
        Signature(pattern=pattern, anchoring=anchoring, family=family, description=description)
        for pattern, anchoring, description in rows
    )


BUILTIN_SIGNATURES: Tuple[Signature, ...] = (
    *_family(
        ProbeFamily.PHP,
        (r"\.php$", SUFFIX, "Any PHP script"),
        (r"/config\.php", ANYWHERE, "PHP config file"),
        (r"/phpinfo", ANYWHERE, "phpinfo() page"),
        (r"/eval-stdin\.php", ANYWHERE, "PHPUnit eval-stdin RCE"),
        (r"/xmlrpc\.php", ANYWHERE, "XML-RPC endpoint"),
    ),
    *_family(
        ProbeFamily.SHELL,
        (r"/ALFA_DATA", ANYWHERE, "ALFA webshell data directory"),
        (r"/c99\.php", ANYWHERE, "c99 webshell"),
        (r"/r57\.php", ANYWHERE, "r57 webshell"),
        (r"/shell\.php", ANYWHERE, "Generic webshell"),
        (r"/webshell", ANYWHERE, "Generic webshell"),
    ),
    # Root level only, so /api/wordpress-integration stays reachable.
    *_family(
        ProbeFamily.WORDPRESS,
        (r"^/wp$", EXACT, "WordPress root"),
        (r"^/wp-", PREFIX, "WordPress root files"),
        (r"^/wordpress", PREFIX, "WordPress install directory"),
    ),
    *_family(
        ProbeFamily.WORDPRESS_INTERNALS,
        (r"/wp-includes/", ANYWHERE, "WordPress core includes"),
        (r"/wp-content/", ANYWHERE, "WordPress content directory"),
        (r"/wp-admin", ANYWHERE, "WordPress admin"),
        (r"wlwmanifest\.xml$", SUFFIX, "Windows Live Writer manifest"),
    ),
    *_family(
        ProbeFamily.UPLOAD_DIRS,
        (r"^/uploads?$", EXACT, "Upload directory"),
        (r"^/images$", EXACT, "Image directory"),
        (r"^/assets$", EXACT, "Asset directory"),
        (r"^/files$", EXACT, "File directory"),
        (r"^/media$", EXACT, "Media directory"),
        (r"^/public$", EXACT, "Public directory"),
    ),
    *_family(
        ProbeFamily.ADMIN_SUBDIRS,
        (r"/admin/(uploads?|images|editor|fckeditor|controller)", ANYWHERE, "Admin upload and editor paths"),
    ),
    *_family(
        ProbeFamily.CMS_DIRS,
        (r"^/modules$", EXACT, "CMS modules directory"),
        (r"^/plugins$", EXACT, "CMS plugins directory"),
        (r"^/components$", EXACT, "CMS components directory"),
        (r"^/system$", EXACT, "CMS system directory"),
        (r"^/template$", EXACT, "CMS template directory"),
        (r"^/includes?$", EXACT, "CMS include directory"),
        (r"^/vendor$", EXACT, "Composer vendor directory"),
        (r"^/local$", EXACT, "Local directory"),
        (r"^/php$", EXACT, "PHP directory"),
    ),
    *_family(
        ProbeFamily.CMS_EXPLOITS,
        (r"/fckeditor/editor/filemanager", ANYWHERE, "FCKeditor file upload"),
        (r"/sites/default/files", ANYWHERE, "Drupal files directory"),
        (r"/images/stories", ANYWHERE, "Joomla stories directory"),
        (r"/modules/mod_simplefileupload", ANYWHERE, "Joomla upload module"),
        (r"/controller/extension", ANYWHERE, "OpenCart extension controller"),
    ),
    *_family(
        ProbeFamily.ADMIN_PANELS,
        (r"^/admin(\.php)?$", EXACT, "Admin panel"),
        (r"^/administrator", PREFIX, "Joomla administrator"),
        (r"^/phpmyadmin", PREFIX, "phpMyAdmin"),
        (r"^/cpanel", PREFIX, "cPanel"),
        (r"^/whm", PREFIX, "WHM"),
        (r"^/cgi-bin", PREFIX, "CGI scripts"),
    ),
    *_family(
        ProbeFamily.CMS_FRAMEWORKS,
        (r"^/typo3", PREFIX, "TYPO3"),
        (r"^/joomla", PREFIX, "Joomla"),
        (r"^/drupal", PREFIX, "Drupal"),
        (r"^/magento", PREFIX, "Magento"),
    ),
    *_family(
        ProbeFamily.SENSITIVE_FILES,
        (r"/\.env", ANYWHERE, "Environment file"),
        (r"/\.git", ANYWHERE, "Git metadata"),
        (r"/\.sql$", SUFFIX, "Bare SQL dump"),
        (r"/\.well-known/security\.txt", ANYWHERE, "security.txt probe"),
        (r"/(vendor|node_modules)/", ANYWHERE, "Dependency directories"),
    ),
    *_family(
        ProbeFamily.BACKUP_FILES,
        (r"\.(bak|old|backup|orig|save|swp)$", SUFFIX, "Backup and editor swap files"),
    ),
    # Root level only, so /api/*/config.json stays reachable.
    *_family(
        ProbeFamily.CONFIG_FILES,
        (r"^/config\.(js|json|yml|yaml|xml|ini|conf)$", EXACT, "Root config file"),
        (r"^/settings\.(js|json|yml|yaml|xml)$", EXACT, "Root settings file"),
        (r"^/credentials\.(js|json|yml|yaml)$", EXACT, "Root credentials file"),
        (r"^/secrets\.(js|json|yml|yaml|env)$", EXACT, "Root secrets file"),
        (r"^/appsettings\.(json|yml|yaml)$", EXACT, ".NET appsettings"),
        (r"^/application\.(yml|yaml|xml|properties)$", EXACT, "Spring application config"),
        (r"^/env\.js$", EXACT, "Environment leak script"),
    ),
    *_family(
        ProbeFamily.SERVER_INFO,
        (r"^/server-(status|info)$", EXACT, "Apache status pages"),
        (r"^/info$", EXACT, "Info page"),
    ),
    # /api/openapi.json and /api/docs/swagger stay reachable.
    *_family(
        ProbeFamily.API_DOCS,
        (r"^/swagger\.(json|yml|yaml)$", EXACT, "Root Swagger document"),
        (r"^/api/swagger\.(json|yml|yaml)$", EXACT, "API Swagger document"),
    ),
    *_family(
        ProbeFamily.ENV_LEAK,
        (r"^/_env", PREFIX, "Environment dump"),
        (r"^/config/", PREFIX, "Root config directory"),
    ),
    # Root level only, so /api/backup-service stays reachable.
    *_family(
        ProbeFamily.BACKUP_DIRS,
        (r"^/backup", PREFIX, "Backup directory"),
        (r"^/bk$", EXACT, "Backup directory"),
        (r"^/bak$", EXACT, "Backup directory"),
        (r"^/bac$", EXACT, "Backup directory"),
        (r"^/dump", PREFIX, "Dump directory"),
    ),
    *_family(
        ProbeFamily.DATABASE,
        (r"^/db_", PREFIX, "Database tooling"),
        (r"^/sql", PREFIX, "SQL tooling"),
    ),
    *_family(
        ProbeFamily.SHELL,
        (r"^/shell", PREFIX, "Shell at root"),
    ),
    *_family(
        ProbeFamily.AUTH,
        (r"^/login$", EXACT, "Login page"),
        (r"^/signin$", EXACT, "Sign-in page"),
        (r"^/register$", EXACT, "Registration page"),
        (r"^/signup$", EXACT, "Sign-up page"),
        (r"^/dashboard$", EXACT, "Dashboard"),
        (r"^/user/(login|signin|register|signup)", PREFIX, "User auth routes"),
    ),
    *_family(
        ProbeFamily.DISCOVERY,
        (r"^/old$", EXACT, "Old site"),
        (r"^/new$", EXACT, "New site"),
        (r"^/test$", EXACT, "Test site"),
        (r"^/demo$", EXACT, "Demo site"),
        (r"^/www$", EXACT, "www directory"),
        (r"^/main$", EXACT, "Main site"),
        (r"^/site$", EXACT, "Site directory"),
        (r"^/shop$", EXACT, "Shop"),
        (r"^/blog$", EXACT, "Blog (not /blogs)"),
        (r"^/bc$", EXACT, "bc directory"),
        (r"^/sitio$", EXACT, "Site (es)"),
        (r"^/sito$", EXACT, "Site (it)"),
        (r"^/oldsite$", EXACT, "Old site"),
        (r"^/old-site$", EXACT, "Old site"),
        (r"^/[0-9]{4}$", EXACT, "Year folder"),
    ),
)


def builtin_signatures() -> Tuple[Signature, ...]:
    """Return the ordered built-in signature list."""
    return BUILTIN_SIGNATURES
