"""Compiler for the egress firewall script (init-firewall.sh).

The script runs as root inside the container at first start. It rebuilds the
packet filter from scratch, so the order of its sections matters:

1. snapshot the Docker DNS NAT rules before anything is flushed
2. flush every table and the allow-list ipset
3. replay the DNS snapshot
4. baseline rules (DNS, SSH, loopback)
5. create the allow-list ipset
6. add the GitHub published ranges (an empty metadata response is fatal)
7. add the resolved addresses of every allowed domain (best effort)
8. allow the host network
9. default-deny policies, only once every allow rule exists
10. keep established connections alive
11. allow egress to the allow-list
"""

from typing import List, Union

from .constants import (
    ALLOWLIST_IPSET_NAME,
    DNS_LOOKUP_TIMEOUT,
    DOCKER_DNS_PATTERN,
    FETCH_CONNECT_TIMEOUT,
    FETCH_MAX_TIME,
    GITHUB_META_URL,
)
from .plan import GenerationPlan, ensure_plan
from ..models.config import DevcontainerConfig


SCRIPT_HEADER = """#!/bin/bash
set -euo pipefail
IFS=$'\\n\\t'"""

SNAPSHOT_DNS_RULES = f"""# Extract Docker DNS info BEFORE any flushing
DOCKER_DNS_RULES=$(iptables-save -t nat | grep "{DOCKER_DNS_PATTERN}" || true)"""

FLUSH_RULES = f"""# Flush existing rules
iptables -F
iptables -X
iptables -t nat -F
iptables -t nat -X
iptables -t mangle -F
iptables -t mangle -X
ipset destroy {ALLOWLIST_IPSET_NAME} 2>/dev/null || true"""

RESTORE_DNS_RULES = """# Restore Docker DNS rules
if [ -n "$DOCKER_DNS_RULES" ]; then
    echo "Restoring Docker DNS rules..."
    iptables -t nat -N DOCKER_OUTPUT 2>/dev/null || true
    iptables -t nat -N DOCKER_POSTROUTING 2>/dev/null || true
    echo "$DOCKER_DNS_RULES" | xargs -L 1 iptables -t nat
fi"""

BASELINE_RULES = """# Allow DNS, SSH and localhost
iptables -A OUTPUT -p udp --dport 53 -j ACCEPT
iptables -A INPUT -p udp --sport 53 -j ACCEPT
iptables -A OUTPUT -p tcp --dport 22 -j ACCEPT
iptables -A INPUT -p tcp --sport 22 -m state --state ESTABLISHED -j ACCEPT
iptables -A INPUT -i lo -j ACCEPT
iptables -A OUTPUT -o lo -j ACCEPT"""

CREATE_IPSET = f"""# Create ipset
ipset create {ALLOWLIST_IPSET_NAME} hash:net"""

GITHUB_RANGES = rf"""# Fetch GitHub IP ranges
echo "Fetching GitHub IP ranges..."
gh_ranges=$(curl -s {GITHUB_META_URL} --connect-timeout {FETCH_CONNECT_TIMEOUT} --max-time {FETCH_MAX_TIME} || true)
if [ -z "$gh_ranges" ]; then
    echo "ERROR: Failed to fetch GitHub IP ranges" >&2
    exit 1
fi

echo "Processing GitHub IPs..."
while read -r cidr; do
    if [[ ! "$cidr" =~ ^[0-9]{{1,3}}\.[0-9]{{1,3}}\.[0-9]{{1,3}}\.[0-9]{{1,3}}/[0-9]{{1,2}}$ ]]; then
        continue
    fi
    ipset add {ALLOWLIST_IPSET_NAME} "$cidr" 2>/dev/null || true
done < <(echo "$gh_ranges" | jq -r '(.web + .api + .git)[]' | aggregate -q)"""

HOST_NETWORK = r"""# Get host network
HOST_IP=$(ip route | grep default | cut -d" " -f3)
HOST_NETWORK=$(echo "$HOST_IP" | sed "s/\.[0-9]*$/.0\/24/")
echo "Host network: $HOST_NETWORK"

iptables -A INPUT -s "$HOST_NETWORK" -j ACCEPT
iptables -A OUTPUT -d "$HOST_NETWORK" -j ACCEPT"""

DEFAULT_POLICIES = """# Set default policies
iptables -P INPUT DROP
iptables -P FORWARD DROP
iptables -P OUTPUT DROP"""

ESTABLISHED_RULES = """# Allow established connections
iptables -A INPUT -m state --state ESTABLISHED,RELATED -j ACCEPT
iptables -A OUTPUT -m state --state ESTABLISHED,RELATED -j ACCEPT"""

ALLOWLIST_RULE = f"""# Allow only whitelisted domains
iptables -A OUTPUT -m set --match-set {ALLOWLIST_IPSET_NAME} dst -j ACCEPT"""

FINISHED = 'echo "Firewall configured successfully"'


def domain_resolution_block(domains) -> str:
    """Resolve each domain and add its IPv4 addresses to the allow-list."""
    domain_list = " ".join(f'"{domain}"' for domain in domains)
    return rf"""# Resolve allowed domains
for domain in {domain_list}; do
    echo "Resolving $domain..."
    ips=$(dig +short A "$domain" +time={DNS_LOOKUP_TIMEOUT} +tries=2 || true)
    while read -r ip; do
        if [[ "$ip" =~ ^[0-9]{{1,3}}\.[0-9]{{1,3}}\.[0-9]{{1,3}}\.[0-9]{{1,3}}$ ]]; then
            ipset add {ALLOWLIST_IPSET_NAME} "$ip" 2>/dev/null || true
        fi
    done < <(echo "$ips")
done"""


def firewall_blocks(plan: GenerationPlan) -> List[str]:
    return [
        SCRIPT_HEADER,
        SNAPSHOT_DNS_RULES,
        FLUSH_RULES,
        RESTORE_DNS_RULES,
        BASELINE_RULES,
        CREATE_IPSET,
        GITHUB_RANGES,
        domain_resolution_block(plan.domains),
        HOST_NETWORK,
        DEFAULT_POLICIES,
        ESTABLISHED_RULES,
        ALLOWLIST_RULE,
        FINISHED,
    ]


def generate_firewall_script(source: Union[DevcontainerConfig, GenerationPlan]) -> str:
    """Generate init-firewall.sh for a configuration or plan."""
    plan = ensure_plan(source)
    return "\n\n".join(firewall_blocks(plan)) + "\n"
