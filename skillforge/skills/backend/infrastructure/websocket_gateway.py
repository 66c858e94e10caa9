"""
WebSocketGateway Skill

Generates a Socket.IO gateway for NestJS with per-event handlers, optional
JWT guard and room management, plus a React ``useSocket`` hook for the client.
"""

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import capitalize


class GatewayEvent(SkillParams):
    name: str = Field(description="Event name (e.g., message, join)")
    has_payload: bool = Field(default=True, description="Whether event has a payload")
    broadcast: bool = Field(default=False, description="Broadcast to all clients")


class WebSocketGatewayParams(SkillParams):
    gateway_name: str = Field(default="Events", description="Name of the gateway (PascalCase)")
    namespace: str | None = Field(default=None, description="Socket.IO namespace (e.g., /chat)")
    events: list[GatewayEvent] = Field(
        default_factory=lambda: [
            GatewayEvent(name="message", has_payload=True, broadcast=True),
            GatewayEvent(name="join", has_payload=True, broadcast=False),
        ],
        description="List of WebSocket events to handle",
    )
    with_auth: bool = Field(default=True, description="Include JWT authentication guard")
    with_rooms: bool = Field(default=True, description="Include room management methods")


WS_JWT_GUARD = """import { CanActivate, ExecutionContext, Injectable } from '@nestjs/common';
import { JwtService } from '@nestjs/jwt';
import { WsException } from '@nestjs/websockets';
import { Socket } from 'socket.io';

@Injectable()
export class WsJwtGuard implements CanActivate {
  constructor(private jwtService: JwtService) {}

  async canActivate(context: ExecutionContext): Promise<boolean> {
    try {
      const client: Socket = context.switchToWs().getClient();
      const token = this.extractToken(client);

      if (!token) {
        throw new WsException('Unauthorized: No token provided');
      }

      const payload = await this.jwtService.verifyAsync(token, {
        secret: process.env.JWT_SECRET,
      });

      // Attach user to socket data
      client.data.user = payload;
      return true;
    } catch (error) {
      throw new WsException('Unauthorized: Invalid token');
    }
  }

  private extractToken(client: Socket): string | undefined {
    // Try auth header first
    const authHeader = client.handshake.headers.authorization;
    if (authHeader?.startsWith('Bearer ')) {
      return authHeader.slice(7);
    }

    // Try query param
    return client.handshake.query.token as string;
  }
}
"""

ROOM_HANDLERS = """
  @SubscribeMessage('room:join')
  handleJoinRoom(
    @ConnectedSocket() client: Socket,
    @MessageBody() payload: { room: string },
  ) {
    client.join(payload.room);
    this.logger.log(`Client ${client.id} joined room: ${payload.room}`);

    // Notify room members
    this.server.to(payload.room).emit('room:joined', {
      clientId: client.id,
      room: payload.room,
    });

    return { event: 'room:join', room: payload.room, status: 'joined' };
  }

  @SubscribeMessage('room:leave')
  handleLeaveRoom(
    @ConnectedSocket() client: Socket,
    @MessageBody() payload: { room: string },
  ) {
    client.leave(payload.room);
    this.logger.log(`Client ${client.id} left room: ${payload.room}`);

    // Notify room members
    this.server.to(payload.room).emit('room:left', {
      clientId: client.id,
      room: payload.room,
    });

    return { event: 'room:leave', room: payload.room, status: 'left' };
  }
"""


def _event_handler(event: GatewayEvent, gateway_name: str, with_rooms: bool) -> str:
    payload_param = "\n    @MessageBody() payload: any," if event.has_payload else ""
    payload_log = ", payload" if event.has_payload else ""

    if not event.broadcast:
        body = f"""// Acknowledge to sender
    return {{ event: '{event.name}', status: 'received' }};"""
    elif with_rooms:
        body = f"""// Broadcast to all clients in the room
    const room = payload.room || 'general';
    this.server.to(room).emit('{event.name}', {{
      from: client.id,
      ...payload,
      timestamp: new Date().toISOString(),
    }});"""
    else:
        spread = "\n      ...payload," if event.has_payload else ""
        body = f"""// Broadcast to all clients
    this.server.emit('{event.name}', {{
      from: client.id,{spread}
      timestamp: new Date().toISOString(),
    }});"""

    return f"""
  @SubscribeMessage('{event.name}')
  handle{capitalize(event.name)}(
    @ConnectedSocket() client: Socket,{payload_param}
  ) {{
    console.log(`[{gateway_name}] {event.name} from ${{client.id}}`{payload_log});

    {body}
  }}"""


def _gateway(params: WebSocketGatewayParams) -> str:
    name = params.gateway_name
    handlers = "\n".join(_event_handler(e, name, params.with_rooms) for e in params.events)

    guard_import = "import { WsJwtGuard } from './ws-jwt.guard';\n" if params.with_auth else ""
    namespace_option = f"\n  namespace: '{params.namespace}'," if params.namespace else ""
    use_guards = "@UseGuards(WsJwtGuard)\n" if params.with_auth else ""
    common_imports = "Logger, UseGuards" if params.with_auth else "Logger"
    rooms = ROOM_HANDLERS if params.with_rooms else ""

    return f"""import {{
  WebSocketGateway,
  WebSocketServer,
  SubscribeMessage,
  OnGatewayInit,
  OnGatewayConnection,
  OnGatewayDisconnect,
  ConnectedSocket,
  MessageBody,
}} from '@nestjs/websockets';
import {{ Server, Socket }} from 'socket.io';
import {{ {common_imports} }} from '@nestjs/common';
{guard_import}
@WebSocketGateway({{{namespace_option}
  cors: {{
    origin: process.env.FRONTEND_URL || '*',
    credentials: true,
  }},
}})
{use_guards}export class {name}Gateway
  implements OnGatewayInit, OnGatewayConnection, OnGatewayDisconnect
{{
  @WebSocketServer()
  server: Server;

  private readonly logger = new Logger({name}Gateway.name);
  private connectedClients: Map<string, {{ id: string; userId?: string }}> = new Map();

  afterInit() {{
    this.logger.log('WebSocket Gateway initialized');
  }}

  handleConnection(client: Socket) {{
    this.logger.log(`Client connected: ${{client.id}}`);
    this.connectedClients.set(client.id, {{ id: client.id }});

    // Notify others
    client.broadcast.emit('user:connected', {{ clientId: client.id }});
  }}

  handleDisconnect(client: Socket) {{
    this.logger.log(`Client disconnected: ${{client.id}}`);
    this.connectedClients.delete(client.id);

    // Notify others
    this.server.emit('user:disconnected', {{ clientId: client.id }});
  }}
{handlers}
{rooms}
  /**
   * Utility: Send to specific client
   */
  sendToClient(clientId: string, event: string, data: any) {{
    this.server.to(clientId).emit(event, data);
  }}

  /**
   * Utility: Broadcast to all
   */
  broadcast(event: string, data: any) {{
    this.server.emit(event, data);
  }}

  /**
   * Utility: Get connected clients count
   */
  getConnectedClientsCount(): number {{
    return this.connectedClients.size;
  }}
}}
"""


def _module(name: str, lower: str, with_auth: bool) -> str:
    jwt_import = "import { JwtModule } from '@nestjs/jwt';\n" if with_auth else ""
    jwt_registration = (
        """  imports: [
    JwtModule.register({
      secret: process.env.JWT_SECRET,
      signOptions: { expiresIn: '7d' },
    }),
  ],
"""
        if with_auth
        else ""
    )
    return f"""import {{ Module }} from '@nestjs/common';
import {{ {name}Gateway }} from './{lower}.gateway';
{jwt_import}
@Module({{
{jwt_registration}  providers: [{name}Gateway],
  exports: [{name}Gateway],
}})
export class {name}Module {{}}
"""


def _socket_hook(namespace: str) -> str:
    return f"""import {{ useEffect, useState, useCallback }} from 'react';
import {{ io, Socket }} from 'socket.io-client';

const SOCKET_URL = process.env.NEXT_PUBLIC_API_URL || 'http://localhost:3000';

interface UseSocketOptions {{
  namespace?: string;
  token?: string;
  autoConnect?: boolean;
}}

export function useSocket(options: UseSocketOptions = {{}}) {{
  const {{ namespace = '{namespace}', token, autoConnect = true }} = options;
  const [socket, setSocket] = useState<Socket | null>(null);
  const [isConnected, setIsConnected] = useState(false);

  useEffect(() => {{
    if (!autoConnect) return;

    const socketInstance = io(`${{SOCKET_URL}}${{namespace}}`, {{
      auth: token ? {{ token }} : undefined,
      query: token ? {{ token }} : undefined,
      transports: ['websocket', 'polling'],
    }});

    socketInstance.on('connect', () => {{
      console.log('Socket connected:', socketInstance.id);
      setIsConnected(true);
    }});

    socketInstance.on('disconnect', () => {{
      console.log('Socket disconnected');
      setIsConnected(false);
    }});

    setSocket(socketInstance);

    return () => {{
      socketInstance.disconnect();
    }};
  }}, [namespace, token, autoConnect]);

  const emit = useCallback(
    (event: string, data?: any) => {{
      socket?.emit(event, data);
    }},
    [socket]
  );

  const on = useCallback(
    (event: string, callback: (data: any) => void) => {{
      socket?.on(event, callback);
      return () => {{
        socket?.off(event, callback);
      }};
    }},
    [socket]
  );

  const joinRoom = useCallback(
    (room: string) => {{
      socket?.emit('room:join', {{ room }});
    }},
    [socket]
  );

  const leaveRoom = useCallback(
    (room: string) => {{
      socket?.emit('room:leave', {{ room }});
    }},
    [socket]
  );

  return {{
    socket,
    isConnected,
    emit,
    on,
    joinRoom,
    leaveRoom,
  }};
}}
"""


class WebSocketGatewaySkill(BaseSkill[WebSocketGatewayParams]):
    name = "websocket_gateway_generator"
    description = "Generates NestJS WebSocket gateway with Socket.IO, JWT auth, rooms, and React hook."
    category = "backend.infrastructure"
    params_model = WebSocketGatewayParams

    async def handle(self, params: WebSocketGatewayParams) -> SkillResult:
        name = params.gateway_name
        lower = name.lower()

        files: dict[str, str] = {f"{lower}.gateway.ts": _gateway(params)}
        if params.with_auth:
            files["ws-jwt.guard.ts"] = WS_JWT_GUARD
        files[f"{lower}.module.ts"] = _module(name, lower, params.with_auth)
        files["use-socket.hook.ts"] = _socket_hook(params.namespace or "/")

        return SkillResult.ok(
            files,
            {
                "gateway": name,
                "namespace": params.namespace,
                "events": [event.name for event in params.events],
                "generated_files": list(files),
            },
        )
