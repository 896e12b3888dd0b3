"""GitHub API and Liberica NIK naming constants."""

# GitHub API URL structure
GITHUB_API_BASE = "https://api.github.com"
GITHUB_REPOS_PATH = "repos"
RELEASES_PATH = "releases"
TAGS_PATH = "tags"
MATCHING_REFS_PATH = "git/matching-refs/tags"
REFS_TAGS_PREFIX = "refs/tags/"

# Liberica NIK repository constants
LIBERICA_GH_USER = "bell-sw"
LIBERICA_RELEASES_REPO = "LibericaNIK"
LIBERICA_JDK_TAG_PREFIX = "jdk-"
LIBERICA_VM_PREFIX = "bellsoft-liberica-vm-"
LIBERICA_RUNTIME_MARKER = "openjdk"
LIBERICA_FULL_VARIANT = "full-"
JAVA_FX_MARKER = "+fx"

ERROR_HINT = (
    "If you think this is a mistake, please check the available releases at "
    f"https://github.com/{LIBERICA_GH_USER}/{LIBERICA_RELEASES_REPO}/releases"
)
