"""Constants used throughout devcontainer-init."""


# Generated artifacts
DEVCONTAINER_DIR_NAME = ".devcontainer"
DEVCONTAINER_JSON_NAME = "devcontainer.json"
DOCKERFILE_NAME = "Dockerfile"
FIREWALL_SCRIPT_NAME = "init-firewall.sh"
FIREWALL_SCRIPT_PATH = f"/usr/local/bin/{FIREWALL_SCRIPT_NAME}"

# Users baked into the base images
NODE_USER = "node"
PYTHON_USER = "vscode"

# Container layout
DEFAULT_WORKDIR = "/workspace"
COMMAND_HISTORY_DIR = "/commandhistory"
NPM_GLOBAL_DIR = "/usr/local/share/npm-global"
PYTHON_INTERPRETER_PATH = "/usr/local/bin/python"
ZSH_IN_DOCKER_VERSION = "1.2.0"
NODESOURCE_SETUP_URL = "https://deb.nodesource.com/setup_20.x"

# Assistant CLI
ASSISTANT_NPM_PACKAGE = "@anthropic-ai/claude-code"
ASSISTANT_CONFIG_DIR_NAME = ".claude"
ASSISTANT_CONFIG_FILE_NAME = ".claude.json"
ASSISTANT_CONFIG_ENV = "CLAUDE_CONFIG_DIR"

# Packages
BASE_APT_PACKAGES = [
    "less",
    "git",
    "procps",
    "sudo",
    "fzf",
    "zsh",
    "man-db",
    "unzip",
    "gnupg2",
    "gh",
    "jq",
    "nano",
    "vim",
]
FIREWALL_APT_PACKAGES = ["iptables", "ipset", "iproute2", "dnsutils", "aggregate"]
PYTHON_DEV_TOOLS = ["poetry", "black", "pylint", "pytest"]

# Firewall policy
ALLOWLIST_IPSET_NAME = "allowed-domains"
DOCKER_DNS_PATTERN = r"127\.0\.0\.11"
GITHUB_META_URL = "https://api.github.com/meta"
FETCH_CONNECT_TIMEOUT = 10  # seconds
FETCH_MAX_TIME = 30  # seconds
DNS_LOOKUP_TIMEOUT = 5  # seconds

SOURCE_HOSTING_DOMAINS = ["api.github.com", "github.com"]
NODE_REGISTRY_DOMAINS = ["registry.npmjs.org"]
PYTHON_REGISTRY_DOMAINS = ["pypi.org", "files.pythonhosted.org"]
ASSISTANT_DOMAINS = [
    "api.anthropic.com",
    "sentry.io",
    "statsig.anthropic.com",
    "statsig.com",
]

# Editor manifest
WORKSPACE_BASENAME = "${localWorkspaceFolderBasename}"
PRIMARY_PORT_LABEL = "Application"
MEMORY_LIMIT_NODE_OPTIONS = "--max-old-space-size=4096"
NODE_FORMATTER = "esbenp.prettier-vscode"
PYTHON_FORMATTER = "ms-python.black-formatter"

# Wizard defaults
DEFAULT_TIMEZONE = "Europe/Paris"
DEFAULT_PORTS = {
    "node": [3000],
    "python": [8000],
}

RUNTIME_OPTIONS = [
    ("node-pnpm", "Node.js with pnpm"),
    ("node-bun", "Node.js with bun"),
    ("python", "Python"),
]

NODE_VERSIONS = [
    ("22", "Node 22 (Latest LTS)"),
    ("20", "Node 20 (LTS)"),
    ("18", "Node 18 (Maintenance)"),
]
DEFAULT_NODE_VERSION = "20"

PYTHON_VERSIONS = [
    ("3.12", "Python 3.12"),
    ("3.11", "Python 3.11"),
    ("3.10", "Python 3.10"),
]
DEFAULT_PYTHON_VERSION = "3.12"

NODE_RUNTIMES = ["node-pnpm", "node-bun"]
ALL_RUNTIMES = NODE_RUNTIMES + ["python"]

# (label, extension id, selected by default, runtimes it applies to)
EXTENSION_CATALOG = [
    ("ESLint", "dbaeumer.vscode-eslint", True, NODE_RUNTIMES),
    ("Prettier", "esbenp.prettier-vscode", True, NODE_RUNTIMES),
    ("Python", "ms-python.python", True, ["python"]),
    ("Pylance", "ms-python.vscode-pylance", True, ["python"]),
    ("Claude Code", "anthropic.claude-code", True, ALL_RUNTIMES),
    ("Conventional Commits", "vivaxy.vscode-conventional-commits", True, ALL_RUNTIMES),
    ("Git Graph", "mhutchie.git-graph", True, ALL_RUNTIMES),
]
