"""
Oracle Errors — таксономия отказов ценового движка

Все отказы фатальны для всего вызова: движок не делает retry, не подставляет
оценочную цену и не возвращает частичный результат. Каждое исключение хранит
свои параметры как атрибуты, чтобы вызывающая сторона могла разобрать причину.

Группы:
- liveness: SequencerDown, GracePeriodNotOver
- lookup: FeedNotFoundError, CommonDenominatorNotFound
- data quality: NegativePrice, PriceTooOld
- input: InvalidInputLengths, IntermediaryDenominationsOutOfBounds
- arithmetic: MulDivOverflow, DivisionByZero

Отдельно — сигналы внешних контрактов (ContractCallReverted, FeedNotRegistered),
которые поднимают реализации registry / feed / token, а не сам движок.
"""


class OracleError(Exception):
    """Базовый класс отказов ценового движка."""


# =============================================================================
# EXTERNAL CONTRACT SIGNALS
# =============================================================================


class ContractCallReverted(Exception):
    """
    Внешний вызов (registry, feed, token) завершился revert.

    Поднимается реализациями collaborator-интерфейсов.
    """

    def __init__(self, target: str, method: str, reason: str = ""):
        self.target = target
        self.method = method
        self.reason = reason
        message = f"Call {method}() on {target} reverted"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class FeedNotRegistered(ContractCallReverted):
    """Feed Registry не знает пары (base, quote)."""

    def __init__(self, base: str, quote: str, registry: str = "feed_registry"):
        self.base = base
        self.quote = quote
        super().__init__(registry, "getFeed", f"Feed not found for {base}/{quote}")


# =============================================================================
# LIVENESS
# =============================================================================


class SequencerDown(OracleError):
    """L2 sequencer сообщает статус down (answer != 0)."""

    def __init__(self):
        super().__init__("L2 sequencer is down")


class GracePeriodNotOver(OracleError):
    """Sequencer поднят недавно, grace period ещё не истёк."""

    def __init__(self, elapsed: int, grace_period: int):
        self.elapsed = elapsed
        self.grace_period = grace_period
        super().__init__(
            f"L2 sequencer grace period not over: up for {elapsed}s, "
            f"grace period {grace_period}s"
        )


# =============================================================================
# LOOKUP
# =============================================================================


class FeedNotFoundError(OracleError):
    """Для пары (asset, denomination) нет зарегистрированного feed."""

    def __init__(self, asset: str, denomination: str):
        self.asset = asset
        self.denomination = denomination
        super().__init__(f"Price feed not found: {asset}/{denomination}")


class CommonDenominatorNotFound(OracleError):
    """Ни один кандидат общего знаменателя не разрешился."""

    def __init__(self, asset_a: str, asset_b: str):
        self.asset_a = asset_a
        self.asset_b = asset_b
        super().__init__(f"Common denominator not found for {asset_a} and {asset_b}")


# =============================================================================
# DATA QUALITY
# =============================================================================


class NegativePrice(OracleError):
    """Feed вернул отрицательный answer."""

    def __init__(self, asset: str, denomination: str, answer: int):
        self.asset = asset
        self.denomination = denomination
        self.answer = answer
        super().__init__(
            f"Feed {asset}/{denomination} returned negative price: {answer}"
        )


class PriceTooOld(OracleError):
    """Последнее обновление feed старше max_price_age."""

    def __init__(self, asset: str, updated_at: int):
        self.asset = asset
        self.updated_at = updated_at
        super().__init__(f"Price of {asset} is too old: last updated at {updated_at}")


# =============================================================================
# INPUT
# =============================================================================


class InvalidInputLengths(OracleError):
    """len(invert_flags) != len(intermediaries) + 1."""

    def __init__(self, intermediaries: int | None = None, invert_flags: int | None = None):
        self.intermediaries = intermediaries
        self.invert_flags = invert_flags
        detail = ""
        if intermediaries is not None and invert_flags is not None:
            detail = f": {intermediaries} intermediaries, {invert_flags} invert flags"
        super().__init__(f"Invalid input lengths{detail}")


class IntermediaryDenominationsOutOfBounds(OracleError):
    """Слишком много промежуточных знаменателей."""

    def __init__(self, provided: int, maximum: int):
        self.provided = provided
        self.maximum = maximum
        super().__init__(
            f"Intermediary denominations out of bounds: {provided} > {maximum}"
        )


# =============================================================================
# ARITHMETIC
# =============================================================================


class MulDivOverflow(OracleError):
    """Результат fixed-point операции не помещается в uint256."""

    def __init__(self, x: int, y: int, denominator: int):
        self.x = x
        self.y = y
        self.denominator = denominator
        super().__init__(
            f"mul_div overflow: {x} * {y} / {denominator} exceeds 256 bits"
        )


class DivisionByZero(OracleError):
    """Нулевой делитель в fixed-point операции (например, нулевая цена при invert)."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        super().__init__(f"mul_div division by zero: {x} * {y} / 0")
