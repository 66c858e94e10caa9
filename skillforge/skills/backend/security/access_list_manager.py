"""
AccessListManager Skill

Generates a NestJS guard that filters requests by client IP, either
accepting only listed addresses (whitelist) or rejecting them (blacklist).
"""

import re
from typing import Literal

from pydantic import Field, field_validator

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import js_json

_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
IPV4_PATTERN = re.compile(rf"(?:{_OCTET}\.){{3}}{_OCTET}")


class AccessListManagerParams(SkillParams):
    type: Literal["whitelist", "blacklist"] = Field(
        description="The type of filtering: accept only listed IPs or reject listed IPs"
    )
    ips: list[str] = Field(description="List of IP addresses to filter")
    action: Literal["allow", "deny", "log_only"] = Field(
        default="deny",
        description="Action to take when a match is found (or not found in case of whitelist)",
    )

    @field_validator("ips")
    @classmethod
    def validate_ips(cls, v: list[str]) -> list[str]:
        for ip in v:
            if not IPV4_PATTERN.fullmatch(ip):
                raise ValueError(f"Invalid IP address format: {ip}")
        return v


def _whitelist_check(log_only: bool) -> str:
    if log_only:
        on_miss = """this.logger.warn(`Access from unauthorized IP: ${clientIp}`);
      return true;"""
    else:
        on_miss = """this.logger.warn(`Blocked access from unauthorized IP: ${clientIp}`);
      throw new ForbiddenException('Access denied from your IP address');"""
    return f"""// Whitelist Logic: Allow ONLY if in list
    const isAllowed = this.restrictedIps.includes(clientIp);
    if (!isAllowed) {{
      {on_miss}
    }}
    return true;"""


def _blacklist_check(log_only: bool) -> str:
    if log_only:
        on_hit = """this.logger.warn(`Detected blacklisted IP: ${clientIp}`);
      return true;"""
    else:
        on_hit = """this.logger.warn(`Blocked blacklisted IP: ${clientIp}`);
      throw new ForbiddenException('Your IP address has been blocked');"""
    return f"""// Blacklist Logic: Deny if IN list
    const isBlocked = this.restrictedIps.includes(clientIp);
    if (isBlocked) {{
      {on_hit}
    }}
    return true;"""


class AccessListManagerSkill(BaseSkill[AccessListManagerParams]):
    name = "access_list_manager"
    description = (
        "Generates security guards to filter traffic based on IP patterns (Whitelist/Blacklist)."
    )
    category = "backend.security"
    params_model = AccessListManagerParams

    async def handle(self, params: AccessListManagerParams) -> SkillResult:
        whitelist = params.type == "whitelist"
        guard_name = "IpWhitelistGuard" if whitelist else "IpBlacklistGuard"
        log_only = params.action == "log_only"
        check = _whitelist_check(log_only) if whitelist else _blacklist_check(log_only)

        code = f"""import {{ Injectable, CanActivate, ExecutionContext, ForbiddenException, Logger }} from '@nestjs/common';
import {{ Request }} from 'express';

@Injectable()
export class {guard_name} implements CanActivate {{
  private readonly logger = new Logger({guard_name}.name);
  private readonly restrictedIps = {js_json(params.ips)};

  canActivate(context: ExecutionContext): boolean {{
    const request = context.switchToHttp().getRequest<Request>();
    const clientIp = request.ip || request.connection.remoteAddress;

    if (!clientIp) {{
      this.logger.warn('Could not determine client IP');
      return false; // Fail safe
    }}

    {check}
  }}
}}
"""

        return SkillResult.ok(
            code,
            {
                "guard": guard_name,
                "config": {"type": params.type, "count": len(params.ips), "action": params.action},
            },
        )
