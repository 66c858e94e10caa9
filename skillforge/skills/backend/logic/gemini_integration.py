"""
GeminiIntegration Skill

Generates a NestJS service wrapping the Google Generative AI SDK: plain text
generation, streaming and chat sessions.
"""

from pydantic import ConfigDict, Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class GeminiIntegrationParams(SkillParams):
    model_config = ConfigDict(protected_namespaces=())

    service_name: str = Field(default="GeminiService", description="Name of the service class")
    api_key_env_var: str = Field(
        default="GEMINI_API_KEY", description="Environment variable name for the API key"
    )
    model_name: str = Field(
        default="gemini-pro",
        description="Default model to use (gemini-pro, gemini-pro-vision)",
    )


def _service(service_name: str, api_key_env_var: str, model_name: str) -> str:
    return f"""import {{ Injectable, InternalServerErrorException }} from '@nestjs/common';
import {{ ConfigService }} from '@nestjs/config';
import {{ GoogleGenerativeAI, GenerativeModel, ChatSession }} from '@google/generative-ai';

@Injectable()
export class {service_name} {{
  private genAI: GoogleGenerativeAI;
  private model: GenerativeModel;

  constructor(private configService: ConfigService) {{
    const apiKey = this.configService.get<string>('{api_key_env_var}');
    if (!apiKey) {{
      throw new Error('{api_key_env_var} is not defined in environment variables');
    }}
    this.genAI = new GoogleGenerativeAI(apiKey);
    this.model = this.genAI.getGenerativeModel({{ model: '{model_name}' }});
  }}

  async generateText(prompt: string): Promise<string> {{
    try {{
      const result = await this.model.generateContent(prompt);
      const response = await result.response;
      return response.text();
    }} catch (error) {{
      console.error('Error generating content:', error);
      throw new InternalServerErrorException('Failed to generate content from Gemini');
    }}
  }}

  async generateStream(prompt: string) {{
    try {{
      const result = await this.model.generateContentStream(prompt);
      return result.stream;
    }} catch (error) {{
      console.error('Error generating stream:', error);
      throw new InternalServerErrorException('Failed to generate stream from Gemini');
    }}
  }}

  startChat(history: {{ role: 'user' | 'model'; parts: string }}[] = []): ChatSession {{
    return this.model.startChat({{
      history: history.map(h => ({{ role: h.role, parts: [{{ text: h.parts }}] }})),
    }});
  }}

  async chatMessage(session: ChatSession, message: string): Promise<string> {{
    try {{
      const result = await session.sendMessage(message);
      const response = await result.response;
      return response.text();
    }} catch (error) {{
      console.error('Error in chat message:', error);
      throw new InternalServerErrorException('Failed to send message to Gemini');
    }}
  }}
}}
"""


class GeminiIntegrationSkill(BaseSkill[GeminiIntegrationParams]):
    name = "gemini_integration"
    description = (
        "Generates a NestJS service for Google Gemini AI integration, supporting text "
        "generation, streaming, and chat sessions."
    )
    category = "backend.logic"
    params_model = GeminiIntegrationParams

    async def handle(self, params: GeminiIntegrationParams) -> SkillResult:
        code = _service(params.service_name, params.api_key_env_var, params.model_name)
        return SkillResult.ok(
            code,
            {
                "dependencies": ["@google/generative-ai", "@nestjs/config"],
                "env_var": params.api_key_env_var,
            },
        )
