"""Static configuration for the generator and the template packager."""

from __future__ import annotations

from dataclasses import dataclass

TOOL_NAME = "create-x402-agent-app"

DEFAULT_PROJECT_NAME = "my-x402-agent"

PACKAGE_MANAGER_CHOICES = {
    "npm": "Node Package Manager",
    "pnpm": "Fast, disk space efficient package manager",
    "yarn": "Yarn package manager",
}

DEFAULT_PACKAGE_MANAGER = next(iter(PACKAGE_MANAGER_CHOICES))

MANIFEST_FILENAME = "package.json"
ENV_FILENAME = ".env"
GITIGNORE_FILENAME = ".gitignore"

TEMPLATE_DIR_ENV = "CREATE_X402_TEMPLATE_DIR"

INITIAL_COMMIT_MESSAGE = f"Initial commit from {TOOL_NAME}"


@dataclass(frozen=True)
class ExclusionRules:
    """Ordered path fragments skipped by the filtered copy.

    A path matches when its root-relative POSIX form starts with a rule or
    contains ``/<rule>``. Rules are plain strings, not globs.
    """

    patterns: tuple[str, ...] = ()

    def matches(self, relative_path: str) -> bool:
        if not relative_path:
            return False
        return any(
            relative_path.startswith(pattern) or f"/{pattern}" in relative_path
            for pattern in self.patterns
        )


NO_EXCLUSIONS = ExclusionRules()

DEFAULT_EXCLUDE_RULES = ExclusionRules(
    (
        "node_modules",
        "dist",
        ".git",
        ".vercel",
        ".DS_Store",
        ".env",
        "package-lock.json",
        "pnpm-lock.yaml",
        "yarn.lock",
        TOOL_NAME,  # the CLI package itself
        ".claude",
    )
)

DEFAULT_GITIGNORE = """node_modules
dist
.DS_Store
server/public
vite.config.ts.*
*.tar.gz
.vercel
.env
"""

ENV_FILE_TEMPLATE = """# OpenAI
OPENAI_API_KEY=

# Coinbase Developer Platform
VITE_CDP_PROJECT_ID=
CDP_API_KEY_ID=
CDP_API_KEY_SECRET=

# x402 Network Configuration (defaults for Base network)
VITE_FACILITATOR_URL=https://x402.org/facilitator
VITE_NETWORK=base
VITE_USDC_CONTRACT_ADDRESS=0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913
"""

DOCUMENTATION_LINKS = (
    "https://x402-agent.vercel.app",
    "https://docs.cdp.coinbase.com/embedded-wallets/",
)

BANNER = """
  ┌─┐┬─┐┌─┐┌─┐┌┬┐┌─┐  ─┐ ┬┌─┐┌─┐┌─┐
  │  ├┬┘├┤ ├─┤ │ ├┤   ┌┴┬┘├─┤│ │┌─┘
  └─┘┴└─└─┘┴ ┴ ┴ └─┘  ┴ └─  ┴└─┘└─┘
"""

TAGLINE = "The missing payment layer for AI agents"


@dataclass(frozen=True)
class ProjectOptions:
    """Answers collected once per run."""

    project_name: str
    package_manager: str = DEFAULT_PACKAGE_MANAGER
    install_deps: bool = True
    init_git: bool = True


__all__ = [
    "BANNER",
    "DEFAULT_EXCLUDE_RULES",
    "DEFAULT_GITIGNORE",
    "DEFAULT_PACKAGE_MANAGER",
    "DEFAULT_PROJECT_NAME",
    "DOCUMENTATION_LINKS",
    "ENV_FILENAME",
    "ENV_FILE_TEMPLATE",
    "ExclusionRules",
    "GITIGNORE_FILENAME",
    "INITIAL_COMMIT_MESSAGE",
    "MANIFEST_FILENAME",
    "NO_EXCLUSIONS",
    "PACKAGE_MANAGER_CHOICES",
    "ProjectOptions",
    "TAGLINE",
    "TEMPLATE_DIR_ENV",
    "TOOL_NAME",
]
