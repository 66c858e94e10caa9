"""
GoogleOAuth Skill

Generates a Passport Google OAuth2 strategy for NestJS with its guard,
controller, JWT-issuing service and module.
"""

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import js_json


class GoogleOAuthParams(SkillParams):
    strategy_name: str = Field(default="google")
    callback_path: str = Field(default="/auth/google/callback")
    frontend_callback_url: str = Field(default="http://localhost:5173/auth/callback")
    scopes: list[str] = Field(default_factory=lambda: ["email", "profile"])


GOOGLE_AUTH_SERVICE = """import { Injectable } from '@nestjs/common';
import { JwtService } from '@nestjs/jwt';
import { InjectRepository } from '@nestjs/typeorm';
import { Repository } from 'typeorm';
// import { User } from './user.entity';

interface GoogleUser {
  googleId: string;
  email: string;
  name: string;
  picture: string;
}

@Injectable()
export class AuthService {
  constructor(
    private jwtService: JwtService,
    // @InjectRepository(User) private userRepo: Repository<User>,
  ) {}

  async handleGoogleLogin(googleUser: GoogleUser) {
    // Find or create user
    // let user = await this.userRepo.findOne({ where: { email: googleUser.email } });
    // if (!user) {
    //   user = await this.userRepo.save({
    //     email: googleUser.email,
    //     name: googleUser.name,
    //     picture: googleUser.picture,
    //     googleId: googleUser.googleId,
    //   });
    // }

    const payload = { email: googleUser.email, sub: googleUser.googleId };
    const token = this.jwtService.sign(payload);

    return {
      token,
      user: {
        email: googleUser.email,
        name: googleUser.name,
        picture: googleUser.picture,
      },
    };
  }
}
"""

GOOGLE_AUTH_MODULE = """import { Module } from '@nestjs/common';
import { PassportModule } from '@nestjs/passport';
import { JwtModule } from '@nestjs/jwt';
import { GoogleStrategy } from './google.strategy';
import { AuthController } from './auth.controller';
import { AuthService } from './auth.service';

@Module({
  imports: [
    PassportModule.register({ defaultStrategy: 'jwt' }),
    JwtModule.register({
      secret: process.env.JWT_SECRET,
      signOptions: { expiresIn: '7d' },
    }),
  ],
  providers: [GoogleStrategy, AuthService],
  controllers: [AuthController],
  exports: [AuthService],
})
export class AuthModule {}
"""


def _strategy(strategy_name: str, callback_path: str, scopes: list[str]) -> str:
    return f"""import {{ Injectable }} from '@nestjs/common';
import {{ PassportStrategy }} from '@nestjs/passport';
import {{ Strategy, VerifyCallback, Profile }} from 'passport-google-oauth20';

@Injectable()
export class GoogleStrategy extends PassportStrategy(Strategy, '{strategy_name}') {{
  constructor() {{
    super({{
      clientID: process.env.GOOGLE_CLIENT_ID,
      clientSecret: process.env.GOOGLE_CLIENT_SECRET,
      callbackURL: process.env.API_URL + '{callback_path}',
      scope: {js_json(scopes)},
    }});
  }}

  async validate(
    accessToken: string,
    refreshToken: string,
    profile: Profile,
    done: VerifyCallback,
  ): Promise<any> {{
    const {{ id, emails, photos, displayName }} = profile;

    const user = {{
      googleId: id,
      email: emails?.[0]?.value,
      name: displayName,
      picture: photos?.[0]?.value,
      accessToken,
    }};

    done(null, user);
  }}
}}
"""


def _guard(strategy_name: str) -> str:
    return f"""import {{ Injectable }} from '@nestjs/common';
import {{ AuthGuard }} from '@nestjs/passport';

@Injectable()
export class GoogleAuthGuard extends AuthGuard('{strategy_name}') {{}}
"""


def _controller(frontend_callback_url: str) -> str:
    return f"""import {{ Controller, Get, Req, Res, UseGuards }} from '@nestjs/common';
import {{ GoogleAuthGuard }} from './google-auth.guard';
import {{ AuthService }} from './auth.service';
import {{ Response }} from 'express';

@Controller('auth')
export class AuthController {{
  constructor(private authService: AuthService) {{}}

  @Get('google')
  @UseGuards(GoogleAuthGuard)
  async googleAuth() {{
    // Redirects to Google
  }}

  @Get('google/callback')
  @UseGuards(GoogleAuthGuard)
  async googleCallback(@Req() req: any, @Res() res: Response) {{
    // User data from Google is in req.user
    const {{ token, user }} = await this.authService.handleGoogleLogin(req.user);

    // Redirect to frontend with token
    const params = new URLSearchParams({{
      token,
      user: JSON.stringify(user),
    }});

    res.redirect(`{frontend_callback_url}?${{params}}`);
  }}
}}
"""


class GoogleOAuthSkill(BaseSkill[GoogleOAuthParams]):
    name = "google_oauth_generator"
    description = "Generates NestJS Google OAuth2 strategy with Passport."
    category = "backend.integrations"
    params_model = GoogleOAuthParams

    async def handle(self, params: GoogleOAuthParams) -> SkillResult:
        files = {
            "google.strategy.ts": _strategy(
                params.strategy_name, params.callback_path, params.scopes
            ),
            "google-auth.guard.ts": _guard(params.strategy_name),
            "auth.controller.ts": _controller(params.frontend_callback_url),
            "auth.service.ts": GOOGLE_AUTH_SERVICE,
            "auth.module.ts": GOOGLE_AUTH_MODULE,
        }
        return SkillResult.ok(
            files,
            {
                "strategy_name": params.strategy_name,
                "callback_path": params.callback_path,
                "generated_files": list(files),
            },
        )
