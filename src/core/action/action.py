"""
Action 核心实现

Action 是一个具名的、带 schema 校验的异步操作：
1. 调用前按 input_schema 校验/转换输入
2. 调用 handler
3. 按 output_schema 校验/转换返回值

schema 可以是任意 pydantic 可识别的类型（BaseModel 子类、内置类型、
List[...]、None 表示无返回值），校验由 pydantic.TypeAdapter 完成。
"""

from typing import Any, Awaitable, Callable, Dict, Generic, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from config import load_config
from core.action.exceptions import SchemaValidationError
from core.observation.logger import get_logger
from core.observation.tracing.decorators import trace_logger

logger = get_logger(__name__)

InputT = TypeVar('InputT')
OutputT = TypeVar('OutputT')

ActionHandler = Callable[[Any], Awaitable[Any]]


def _describe_schema(schema: Any) -> str:
    if schema is None:
        return "None"
    if isinstance(schema, type):
        return schema.__name__
    return repr(schema)


def _error_path(loc) -> str:
    return ".".join(str(part) for part in loc)


class Action(Generic[InputT, OutputT]):
    """带 schema 校验的异步可调用对象"""

    def __init__(
        self,
        name: str,
        input_schema: Any,
        output_schema: Any,
        handler: ActionHandler,
        description: Optional[str] = None,
        trace: Optional[bool] = None,
    ):
        self.name = name
        self.description = description
        self.input_schema = input_schema
        self.output_schema = output_schema
        self.metadata: Dict[str, Any] = {}
        self._input_adapter = TypeAdapter(input_schema)
        self._output_adapter = TypeAdapter(output_schema)

        settings = load_config("app")
        if trace is None:
            trace = bool(settings.get("actions.trace", True))
        if trace:
            handler = trace_logger(
                operation_name=f"action:{name}",
                log_level=settings.get("actions.trace_level", "debug"),
                logger_name=__name__,
            )(handler)
        self._handler = handler

    def __repr__(self) -> str:
        return (
            f"Action(name={self.name!r}, input={_describe_schema(self.input_schema)}, "
            f"output={_describe_schema(self.output_schema)})"
        )

    async def __call__(self, payload: Any) -> OutputT:
        validated = self._validate(self._input_adapter, payload, "input")
        result = await self._handler(validated)
        return self._validate(self._output_adapter, result, "output")

    def _validate(self, adapter: TypeAdapter, value: Any, stage: str) -> Any:
        try:
            return adapter.validate_python(value)
        except ValidationError as e:
            errors = e.errors(include_url=False)
            first = errors[0] if errors else {}
            schema = self.input_schema if stage == "input" else self.output_schema
            logger.debug(
                "action %s rejected %s: %d error(s)", self.name, stage, len(errors)
            )
            raise SchemaValidationError(
                action_name=self.name,
                stage=stage,
                path=_error_path(first.get("loc", ())),
                message=first.get("msg", str(e)),
                errors=errors,
                expected=_describe_schema(schema),
                original_exception=e,
            ) from e


def action(
    name: str,
    input_schema: Any,
    output_schema: Any,
    handler: ActionHandler,
    description: Optional[str] = None,
) -> Action:
    """
    创建 Action

    Args:
        name: action 名称
        input_schema: 输入 schema
        output_schema: 输出 schema，None 表示无返回值
        handler: 接收已校验输入的协程函数

    Returns:
        可直接 await 调用的 Action
    """
    return Action(name, input_schema, output_schema, handler, description=description)
