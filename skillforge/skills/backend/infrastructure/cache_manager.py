"""
CacheManager Skill

Generates NestJS caching infrastructure: a global cache module (Redis or
in-memory store), a prefixing cache service, and optionally a @Cacheable
decorator with its interceptor.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class CacheManagerParams(SkillParams):
    cache_type: Literal["redis", "memory"] = Field(
        default="redis", description="Type of cache store"
    )
    default_ttl: int = Field(
        default=3600, ge=1, alias="defaultTTL", description="Default TTL in seconds"
    )
    key_prefix: str = Field(default="app", description="Prefix for cache keys")
    generate_decorator: bool = Field(default=True, description="Generate @Cacheable decorator")
    generate_interceptor: bool = Field(default=True, description="Generate CacheInterceptor")


CACHEABLE_DECORATOR = """import { SetMetadata } from '@nestjs/common';

export const CACHE_KEY_METADATA = 'cache:key';
export const CACHE_TTL_METADATA = 'cache:ttl';

export interface CacheableOptions {
  key?: string;
  ttl?: number;
}

/**
 * @Cacheable decorator for automatic caching
 * Use with CacheInterceptor
 *
 * @example
 * @Cacheable({ key: 'users:all', ttl: 300 })
 * async findAll() { ... }
 */
export const Cacheable = (options: CacheableOptions = {}) => {
  return (target: any, propertyKey: string, descriptor: PropertyDescriptor) => {
    SetMetadata(CACHE_KEY_METADATA, options.key || `${target.constructor.name}:${propertyKey}`)(target, propertyKey, descriptor);
    if (options.ttl) {
      SetMetadata(CACHE_TTL_METADATA, options.ttl)(target, propertyKey, descriptor);
    }
    return descriptor;
  };
};
"""

CACHE_INTERCEPTOR = """import {
  Injectable,
  NestInterceptor,
  ExecutionContext,
  CallHandler,
} from '@nestjs/common';
import { Observable, of } from 'rxjs';
import { tap } from 'rxjs/operators';
import { Reflector } from '@nestjs/core';
import { CacheService } from './cache.service';
import { CACHE_KEY_METADATA, CACHE_TTL_METADATA } from './cacheable.decorator';

@Injectable()
export class CustomCacheInterceptor implements NestInterceptor {
  constructor(
    private cacheService: CacheService,
    private reflector: Reflector,
  ) {}

  async intercept(
    context: ExecutionContext,
    next: CallHandler,
  ): Promise<Observable<any>> {
    const cacheKey = this.reflector.get<string>(
      CACHE_KEY_METADATA,
      context.getHandler(),
    );

    if (!cacheKey) {
      return next.handle();
    }

    const ttl = this.reflector.get<number>(CACHE_TTL_METADATA, context.getHandler());
    const request = context.switchToHttp().getRequest();

    // Build dynamic key with query params if needed
    const dynamicKey = request.query.id
      ? `${cacheKey}:${request.query.id}`
      : cacheKey;

    const cachedResponse = await this.cacheService.get(dynamicKey);
    if (cachedResponse) {
      return of(cachedResponse);
    }

    return next.handle().pipe(
      tap(async (response) => {
        await this.cacheService.set(dynamicKey, response, ttl);
      }),
    );
  }
}
"""

CACHE_EXAMPLE = """// Example usage in a service or controller
import { Cacheable } from './cacheable.decorator';
import { UseInterceptors } from '@nestjs/common';
import { CustomCacheInterceptor } from './cache.interceptor';

@Controller('products')
@UseInterceptors(CustomCacheInterceptor)
export class ProductsController {

  @Get()
  @Cacheable({ key: 'products:all', ttl: 300 }) // 5 minutes
  findAll() {
    return this.productsService.findAll();
  }

  @Get(':id')
  @Cacheable({ key: 'products:single', ttl: 600 }) // 10 minutes
  findOne(@Param('id') id: string) {
    return this.productsService.findOne(id);
  }

  @Post()
  async create(@Body() dto: CreateProductDto) {
    const product = await this.productsService.create(dto);
    // Invalidate list cache
    await this.cacheService.del('products:all');
    return product;
  }
}
"""


def _cache_module(cache_type: str, default_ttl: int) -> str:
    if cache_type == "redis":
        store_import = "import * as redisStore from 'cache-manager-redis-store';\n"
        store_options = """      store: redisStore,
      host: process.env.REDIS_HOST || 'localhost',
      port: parseInt(process.env.REDIS_PORT || '6379'),
      password: process.env.REDIS_PASSWORD,
"""
    else:
        store_import = ""
        store_options = ""

    return f"""import {{ Module, Global }} from '@nestjs/common';
import {{ CacheModule as NestCacheModule }} from '@nestjs/cache-manager';
{store_import}import {{ CacheService }} from './cache.service';

@Global()
@Module({{
  imports: [
    NestCacheModule.register({{
{store_options}      ttl: {default_ttl},
      max: 100, // max items in cache
    }}),
  ],
  providers: [CacheService],
  exports: [CacheService, NestCacheModule],
}})
export class CacheModule {{}}
"""


def _cache_service(key_prefix: str, default_ttl: int) -> str:
    return f"""import {{ Injectable, Inject }} from '@nestjs/common';
import {{ CACHE_MANAGER }} from '@nestjs/cache-manager';
import {{ Cache }} from 'cache-manager';

@Injectable()
export class CacheService {{
  private readonly prefix = '{key_prefix}';

  constructor(@Inject(CACHE_MANAGER) private cacheManager: Cache) {{}}

  private buildKey(key: string): string {{
    return `${{this.prefix}}:${{key}}`;
  }}

  async get<T>(key: string): Promise<T | undefined> {{
    return this.cacheManager.get<T>(this.buildKey(key));
  }}

  async set<T>(key: string, value: T, ttl?: number): Promise<void> {{
    await this.cacheManager.set(this.buildKey(key), value, ttl || {default_ttl});
  }}

  async del(key: string): Promise<void> {{
    await this.cacheManager.del(this.buildKey(key));
  }}

  async reset(): Promise<void> {{
    await this.cacheManager.reset();
  }}

  /**
   * Cache-aside pattern: Get from cache or fetch and cache
   */
  async getOrSet<T>(
    key: string,
    fetcher: () => Promise<T>,
    ttl?: number,
  ): Promise<T> {{
    const cached = await this.get<T>(key);
    if (cached !== undefined) {{
      return cached;
    }}

    const fresh = await fetcher();
    await this.set(key, fresh, ttl);
    return fresh;
  }}

  /**
   * Invalidate multiple keys by pattern (useful for entity updates)
   */
  async invalidateByPattern(pattern: string): Promise<void> {{
    // Note: Pattern invalidation requires Redis with SCAN command
    // For memory cache, you'd need to track keys manually
    console.log(`Invalidating keys matching: ${{this.prefix}}:${{pattern}}`);
  }}
}}
"""


class CacheManagerSkill(BaseSkill[CacheManagerParams]):
    name = "cache_manager"
    description = (
        "Generates NestJS caching infrastructure with Redis/Memory support, "
        "decorators, and interceptors."
    )
    category = "backend.infrastructure"
    params_model = CacheManagerParams

    async def handle(self, params: CacheManagerParams) -> SkillResult:
        files: dict[str, str] = {
            "cache.module.ts": _cache_module(params.cache_type, params.default_ttl),
            "cache.service.ts": _cache_service(params.key_prefix, params.default_ttl),
        }
        if params.generate_decorator:
            files["cacheable.decorator.ts"] = CACHEABLE_DECORATOR
        if params.generate_interceptor:
            files["cache.interceptor.ts"] = CACHE_INTERCEPTOR
        files["cache.example.ts"] = CACHE_EXAMPLE

        return SkillResult.ok(
            files,
            {
                "cache_type": params.cache_type,
                "default_ttl": params.default_ttl,
                "generated_files": list(files),
            },
        )
