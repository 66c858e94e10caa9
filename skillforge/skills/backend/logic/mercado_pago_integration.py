"""
MercadoPagoIntegration Skill

Generates Mercado Pago v2 SDK code for checkout preferences and payment
webhooks, either as a NestJS service/controller pair or as plain exported
functions.
"""

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import strip_leading_slash


class MercadoPagoIntegrationParams(SkillParams):
    access_token_env_var: str = Field(
        default="MERCADOPAGO_ACCESS_TOKEN",
        description="Environment variable name for the Access Token",
    )
    webhook_path: str = Field(
        default="/webhooks/mercadopago", description="Endpoint path for handling IPN/Webhooks"
    )
    use_nest_js: bool = Field(
        default=True, description="Generate code tailored for NestJS (Controller/Service)"
    )
    include_items_sample: bool = Field(
        default=True, description="Include sample items structure in Preference creation"
    )


SAMPLE_ITEMS = """
      items: [
        {
          id: '1234',
          title: 'Dummy Item',
          quantity: 1,
          currency_id: 'ARS',
          unit_price: 100.50
        }
      ],"""

EMPTY_ITEMS = "items: [], // Populate with dynamic items from your cart/order"


def _nestjs(token_var: str, webhook_path: str, items: str) -> str:
    return f"""
import {{ Injectable, Controller, Post, Body, Get, Query, BadRequestException }} from '@nestjs/common';
import MercadoPagoConfig, {{ Preference, Payment }} from 'mercadopago';

@Injectable()
export class MercadoPagoService {{
  private client: MercadoPagoConfig;

  constructor() {{
    // SECURITY: Access Token is loaded from environment variables
    this.client = new MercadoPagoConfig({{ accessToken: process.env.{token_var} || '' }});
  }}

  /*
   * Create a Payment Preference
   * This generates the initialization link for the frontend checkout.
   */
  async createPreference() {{
    const preference = new Preference(this.client);

    try {{
      const response = await preference.create({{
        body: {{
          {items}
          back_urls: {{
            success: 'https://your-site.com/success',
            failure: 'https://your-site.com/failure',
            pending: 'https://your-site.com/pending',
          }},
          auto_return: 'approved',
          notification_url: `${{process.env.API_URL}}{webhook_path}` // WEBHOOK for IPN
        }}
      }});

      return {{ init_point: response.init_point, preference_id: response.id }};
    }} catch (error) {{
      console.error('Error creating preference:', error);
      throw new BadRequestException('Failed to create payment preference');
    }}
  }}

  /*
   * Handle Webhook (IPN)
   * Listens for payment updates from Mercado Pago.
   */
  async handleWebhook(query: any) {{
    const paymentId = query['data.id'] || query['id'];
    const topic = query['type'] || query['topic'];

    if (topic === 'payment' && paymentId) {{
      const payment = new Payment(this.client);

      try {{
        const paymentData = await payment.get({{ id: paymentId }});

        // TODO: Update your database status here
        console.log('Payment Status:', paymentData.status);
        console.log('Payment ID:', paymentData.id);

        if (paymentData.status === 'approved') {{
           // await this.ordersService.markAsPaid(paymentData.external_reference);
        }}

      }} catch (error) {{
        console.error('Error fetching payment data:', error);
      }}
    }}
  }}
}}

@Controller('mercadopago')
export class MercadoPagoController {{
  constructor(private readonly mpService: MercadoPagoService) {{}}

  @Post('create-preference')
  async createPreference() {{
    return this.mpService.createPreference();
  }}

  @Post('{strip_leading_slash(webhook_path)}')
  async handleWebhook(@Query() query: any, @Body() body: any) {{
    // Mercado Pago creates a mix of query params and body depending on the event type
    return this.mpService.handleWebhook({{ ...query, ...body }});
  }}
}}
"""


def _generic(token_var: str, webhook_path: str, items: str) -> str:
    return f"""
import MercadoPagoConfig, {{ Preference, Payment }} from 'mercadopago';

// Initialize Client
const client = new MercadoPagoConfig({{ accessToken: process.env.{token_var} || '' }});

// Create Preference Function
export const createPreference = async () => {{
  const preference = new Preference(client);

  const response = await preference.create({{
        body: {{
          {items}
          back_urls: {{
            success: 'https://your-site.com/success',
            failure: 'https://your-site.com/failure',
            pending: 'https://your-site.com/pending',
          }},
          auto_return: 'approved',
          notification_url: `${{process.env.API_URL}}{webhook_path}`
        }}
  }});

  return response;
}};

// Webhook Handler Function
export const handleWebhook = async (query: any) => {{
    const paymentId = query['data.id'] || query['id'];
    const topic = query['type'] || query['topic'];

    if (topic === 'payment' && paymentId) {{
       const payment = new Payment(client);
       const paymentData = await payment.get({{ id: paymentId }});

       return paymentData;
    }}
}};
"""


class MercadoPagoIntegrationSkill(BaseSkill[MercadoPagoIntegrationParams]):
    name = "generate_mercadopago_integration"
    description = (
        "Generates robust Mercado Pago integration code (Preferences & Webhooks) "
        "using the v2 SDK."
    )
    category = "backend.logic"
    params_model = MercadoPagoIntegrationParams

    async def handle(self, params: MercadoPagoIntegrationParams) -> SkillResult:
        items = SAMPLE_ITEMS if params.include_items_sample else EMPTY_ITEMS
        render = _nestjs if params.use_nest_js else _generic
        code = render(params.access_token_env_var, params.webhook_path, items).strip()

        return SkillResult.ok(
            code,
            {
                "description": "Mercado Pago Integration Code v2",
                "type": "NestJS Module" if params.use_nest_js else "Generic TS",
                "sdk_version": "mercadopago (v2)",
            },
        )
