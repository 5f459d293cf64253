"""Dockerfile blocks for the devcontainer image.

Each block is a template filled from the generation plan. Node and Python
images share most blocks; they differ in base image, user setup and package
manager. Blocks that need root switch to it and hand the build back to the
runtime user before they end.
"""

from typing import List, Union

from .constants import (
    ASSISTANT_CONFIG_DIR_NAME,
    ASSISTANT_NPM_PACKAGE,
    BASE_APT_PACKAGES,
    COMMAND_HISTORY_DIR,
    DEFAULT_WORKDIR,
    FIREWALL_APT_PACKAGES,
    FIREWALL_SCRIPT_NAME,
    FIREWALL_SCRIPT_PATH,
    NODESOURCE_SETUP_URL,
    NPM_GLOBAL_DIR,
    PYTHON_DEV_TOOLS,
    ZSH_IN_DOCKER_VERSION,
)
from .plan import GenerationPlan, NodeRuntime, ensure_plan
from ..models.config import DevcontainerConfig


BASE_IMAGE_TEMPLATE = """FROM {base_image}

ARG TZ
ENV TZ="$TZ\""""

APT_TEMPLATE = """# Install basic development tools
RUN apt-get update && apt-get install -y --no-install-recommends \\
{packages} \\
  && apt-get clean && rm -rf /var/lib/apt/lists/*"""

NODE_USER_TEMPLATE = """# Ensure default node user has access to /usr/local/share
RUN mkdir -p {npm_global} && \\
  chown -R {user}:{user} /usr/local/share

ARG USERNAME={user}"""

PYTHON_USER_TEMPLATE = """# Create non-root user
ARG USERNAME={user}
RUN useradd -ms /bin/zsh $USERNAME && \\
  echo "$USERNAME ALL=(ALL) NOPASSWD:ALL" >> /etc/sudoers"""

HISTORY_TEMPLATE = """# Persist bash history
RUN mkdir {history} && \\
  touch {history}/.bash_history && \\
  chown -R $USERNAME {history}

ENV DEVCONTAINER=true"""

WORKSPACE_TEMPLATE = """# Create workspace and config directories
RUN mkdir -p {workdir} {home}/{config_dir} && \\
  chown -R {user}:{user} {workdir} {home}/{config_dir}

WORKDIR {workdir}

USER {user}"""

NPM_GLOBAL_TEMPLATE = """# Set up npm global
ENV NPM_CONFIG_PREFIX={npm_global}
ENV PATH=$PATH:{npm_global}/bin"""

SHELL_ENV = """# Shell config
ENV SHELL=/bin/zsh
ENV EDITOR=nano
ENV VISUAL=nano"""

ZSH_TEMPLATE = """# Install zsh with plugins
ARG ZSH_IN_DOCKER_VERSION={zsh_version}
RUN sh -c "$(wget -O- https://github.com/deluan/zsh-in-docker/releases/download/v${{ZSH_IN_DOCKER_VERSION}}/zsh-in-docker.sh)" -- \\
  -p git \\
  -p fzf \\
  -a "source /usr/share/doc/fzf/examples/key-bindings.zsh" \\
  -a "source /usr/share/doc/fzf/examples/completion.zsh" \\
  -a "export PROMPT_COMMAND='history -a' && export HISTFILE={history}/.bash_history" \\
  -x"""

PNPM_INSTALL = """# Install pnpm
RUN npm install -g pnpm"""

BUN_TEMPLATE = """# Install bun
RUN curl -fsSL https://bun.sh/install | bash
ENV PATH=$PATH:{home}/.bun/bin"""

PYTHON_TOOLS_TEMPLATE = """# Install Python tools
RUN pip install --user {tools}"""

NODE_ASSISTANT_TEMPLATE = """# Install Claude CLI
RUN npm install -g {package}"""

PYTHON_ASSISTANT_TEMPLATE = """# Install Node.js for Claude CLI
USER root
RUN curl -fsSL {nodesource} | bash - && \\
  apt-get install -y nodejs && \\
  npm install -g {package}
USER {user}"""

ASSISTANT_ALIASES = """# Add Claude CLI aliases
RUN echo "" >> ~/.zshrc && \\
    echo "# Claude CLI aliases" >> ~/.zshrc && \\
    echo 'alias cc="claude --dangerously-skip-permissions"' >> ~/.zshrc && \\
    echo 'alias ccc="claude --dangerously-skip-permissions -c"' >> ~/.zshrc"""

FIREWALL_TEMPLATE = """# Copy and set up firewall script
COPY {script_name} /usr/local/bin/
USER root
RUN chmod +x {script_path} && \\
  echo "{user} ALL=(root) NOPASSWD: {script_path}" > /etc/sudoers.d/{user}-firewall && \\
  chmod 0440 /etc/sudoers.d/{user}-firewall
USER {user}"""


def apt_packages(plan: GenerationPlan) -> List[str]:
    """Packages installed with apt; python images also need curl."""
    packages = list(BASE_APT_PACKAGES)
    if not plan.is_node:
        packages.append("curl")
    if plan.firewall:
        packages.extend(FIREWALL_APT_PACKAGES)
    return packages


def _package_manager_block(plan: GenerationPlan) -> str:
    runtime = plan.runtime
    if isinstance(runtime, NodeRuntime):
        if runtime.package_manager == "bun":
            return BUN_TEMPLATE.format(home=plan.home)
        return PNPM_INSTALL
    return PYTHON_TOOLS_TEMPLATE.format(tools=" ".join(PYTHON_DEV_TOOLS))


def _assistant_blocks(plan: GenerationPlan) -> List[str]:
    if plan.is_node:
        install = NODE_ASSISTANT_TEMPLATE.format(package=ASSISTANT_NPM_PACKAGE)
    else:
        # The CLI is an npm package; python images need node to host it
        install = PYTHON_ASSISTANT_TEMPLATE.format(
            nodesource=NODESOURCE_SETUP_URL,
            package=ASSISTANT_NPM_PACKAGE,
            user=plan.user,
        )
    return [install, ASSISTANT_ALIASES]


def dockerfile_blocks(plan: GenerationPlan) -> List[str]:
    """Return the ordered Dockerfile blocks for a plan."""
    user = plan.user
    packages = " \\\n".join(f"  {package}" for package in apt_packages(plan))

    blocks = [
        BASE_IMAGE_TEMPLATE.format(base_image=plan.runtime.base_image),
        APT_TEMPLATE.format(packages=packages),
    ]

    if plan.is_node:
        blocks.append(NODE_USER_TEMPLATE.format(npm_global=NPM_GLOBAL_DIR, user=user))
    else:
        blocks.append(PYTHON_USER_TEMPLATE.format(user=user))

    blocks.append(HISTORY_TEMPLATE.format(history=COMMAND_HISTORY_DIR))
    blocks.append(WORKSPACE_TEMPLATE.format(
        workdir=DEFAULT_WORKDIR,
        home=plan.home,
        config_dir=ASSISTANT_CONFIG_DIR_NAME,
        user=user,
    ))

    if plan.is_node:
        blocks.append(NPM_GLOBAL_TEMPLATE.format(npm_global=NPM_GLOBAL_DIR))

    blocks.append(SHELL_ENV)
    blocks.append(ZSH_TEMPLATE.format(
        zsh_version=ZSH_IN_DOCKER_VERSION,
        history=COMMAND_HISTORY_DIR,
    ))
    blocks.append(_package_manager_block(plan))

    if plan.assistant:
        blocks.extend(_assistant_blocks(plan))

    if plan.firewall:
        blocks.append(FIREWALL_TEMPLATE.format(
            script_name=FIREWALL_SCRIPT_NAME,
            script_path=FIREWALL_SCRIPT_PATH,
            user=user,
        ))

    return blocks


def generate_dockerfile(source: Union[DevcontainerConfig, GenerationPlan]) -> str:
    """Generate the Dockerfile for a configuration or plan."""
    plan = ensure_plan(source)
    return "\n\n".join(dockerfile_blocks(plan)) + "\n"
