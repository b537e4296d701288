"""
Build manifest (Cargo.toml) for a generated case.
"""

import typing

from .          import literals, vocab
from .common    import LBFLOW_GIT_URL
from .template  import get_template

MANIFEST_TEMPLATE = "Cargo.toml.mako"


def revision_suffix(commit_hash: typing.Optional[str]) -> str:
    if commit_hash is None or len(commit_hash.strip()) == 0:
        return ""

    return f", rev = {literals.string(commit_hash.strip())}"


def render_manifest(case_name: str, commit_hash: typing.Optional[str] = None) -> str:
    """
    Cargo.toml binding the case to lbflow, pinned to commit_hash when one is
    given and following the default branch otherwise. The package name is the
    case name without surrounding whitespace, like the case directory.
    """
    return get_template(MANIFEST_TEMPLATE).render(
        name=literals.string(case_name.strip()),
        version=literals.string(vocab.PACKAGE_VERSION),
        edition=literals.string(vocab.PACKAGE_EDITION),
        crate=vocab.CRATE,
        crate_version=literals.string(vocab.CRATE_VERSION),
        git_url=literals.string(LBFLOW_GIT_URL),
        revision=revision_suffix(commit_hash),
    )
