"""
LoggerProvider Skill

Generates structured logging configuration for NestJS with Winston or Pino.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult

RECOMMENDED_DEPENDENCIES = {
    "winston": ["nest-winston", "winston"],
    "pino": ["nestjs-pino", "pino-http", "pino-pretty"],
}


class LoggerProviderParams(SkillParams):
    library: Literal["winston", "pino"] = Field(
        default="winston", description="Logging library to use"
    )
    context_name: str = Field(default="MyApp", description="Default context name for the logger")


def _winston_config(context_name: str) -> str:
    return f"""import {{ WinstonModule, utilities as nestWinstonModuleUtilities }} from 'nest-winston';
import * as winston from 'winston';

export const loggerConfig = WinstonModule.createLogger({{
  transports: [
    new winston.transports.Console({{
      format: winston.format.combine(
        winston.format.timestamp(),
        winston.format.ms(),
        nestWinstonModuleUtilities.format.nestLike('{context_name}', {{
          colors: true,
          prettyPrint: true,
        }}),
      ),
    }}),
    // Add File transport here if needed
    // new winston.transports.File({{ filename: 'error.log', level: 'error' }}),
  ],
}});

// Usage in main.ts:
// app.useLogger(loggerConfig);
"""


def _pino_config(context_name: str) -> str:
    return f"""import {{ LoggerErrorInterceptor }} from 'nestjs-pino';
// Make sure to import LoggerModule from 'nestjs-pino' in AppModule

export const pinoConfig = {{
  pinoHttp: {{
    name: '{context_name}',
    level: process.env.NODE_ENV !== 'production' ? 'debug' : 'info',
    transport: process.env.NODE_ENV !== 'production'
      ? {{ target: 'pino-pretty' }}
      : undefined,
  }},
}};
"""


class LoggerProviderSkill(BaseSkill[LoggerProviderParams]):
    name = "logger_provider"
    description = "Generates configuration for structured logging (Winston or Pino)."
    category = "backend.infrastructure"
    params_model = LoggerProviderParams

    async def handle(self, params: LoggerProviderParams) -> SkillResult:
        if params.library == "winston":
            code = _winston_config(params.context_name)
        else:
            code = _pino_config(params.context_name)

        return SkillResult.ok(
            code,
            {
                "library": params.library,
                "recommended_dependencies": RECOMMENDED_DEPENDENCIES[params.library],
            },
        )
