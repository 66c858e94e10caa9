"""
LoadTestConfig Skill

Generates a k6 script running a fixed number of virtual users against one URL.
"""

from pydantic import Field, field_validator

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import check_url, js_scalar


class LoadTestConfigParams(SkillParams):
    target_url: str = Field(description="The base endpoint URL to stress test")
    vus: int = Field(default=10, ge=1, description="Number of Virtual Users")
    duration: str = Field(default="30s", description="Duration of the test, e.g. 30s, 1m")

    @field_validator("target_url")
    @classmethod
    def validate_target_url(cls, v: str) -> str:
        return check_url(v)


class LoadTestConfigSkill(BaseSkill[LoadTestConfigParams]):
    name = "load_test_config"
    description = "Generates a K6 load testing script."
    category = "backend.testing"
    params_model = LoadTestConfigParams

    async def handle(self, params: LoadTestConfigParams) -> SkillResult:
        code = f"""import http from 'k6/http';
import {{ sleep, check }} from 'k6';

export const options = {{
  vus: {js_scalar(params.vus)},
  duration: '{params.duration}',
  thresholds: {{
    http_req_duration: ['p(95)<500'], // 95% of requests should be below 500ms
  }},
}};

export default function () {{
  const res = http.get('{params.target_url}');

  check(res, {{
    'is status 200': (r) => r.status === 200,
    'protocol is HTTP/2': (r) => r.proto === 'HTTP/2.0',
  }});

  sleep(1);
}}
"""

        return SkillResult.ok(code, {"tool": "k6", "scenario": "simple-load-test"})
