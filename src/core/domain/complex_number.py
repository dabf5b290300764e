"""
ComplexNumber — Модель комплексного числа

Immutable Pydantic модель (re, im). Компоненты могут быть int или float;
целые компоненты сохраняются как int.

Главный квадратный корень:
    |z| = hypot(a, b)
    t   = sqrt((|z| + |a|) / 2)
    a >= 0: (t, b / 2t)
    a <  0: (|b| / 2t, copysign(t, b))

Малая компонента считается делением, а не через |z| - |a|:
при |a| >> |b| разность двух близких чисел обнуляется.

re' >= 0 всегда (стандартный разрез по отрицательной вещественной оси).
"""

import logging
import math
from typing import Union

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ComplexNumber(BaseModel):
    """
    Комплексное число a + bi.

    Равенство: обе компоненты равны (ComplexNumber(re=1, im=0) == ComplexNumber(re=1.0, im=0.0)).
    Строковое представление "a+bi" только для диагностики, обратного
    парсинга нет.
    """

    re: Union[int, float] = Field(..., description="Вещественная часть")
    im: Union[int, float] = Field(default=0, description="Мнимая часть")

    model_config = {"frozen": True}  # Immutable

    @classmethod
    def from_pair(cls, re: Union[int, float], im: Union[int, float]) -> "ComplexNumber":
        """Конструирование из пары (re, im)."""
        return cls(re=re, im=im)

    @classmethod
    def from_builtin(cls, value: complex) -> "ComplexNumber":
        """Конструирование из встроенного complex."""
        return cls(re=value.real, im=value.imag)

    def to_builtin(self) -> complex:
        """Конверсия во встроенный complex."""
        return complex(self.re, self.im)

    def modulus(self) -> float:
        """Модуль |z| = sqrt(re² + im²)."""
        return math.hypot(self.re, self.im)

    def conjugate(self) -> "ComplexNumber":
        """Сопряжённое число a - bi."""
        return ComplexNumber(re=self.re, im=-self.im)

    def sqrt(self) -> "ComplexNumber":
        """
        Главный квадратный корень (re >= 0).

        Returns:
            Новый ComplexNumber с float компонентами

        Examples:
            >>> str(ComplexNumber(re=3, im=4).sqrt())
            '2.0+1.0i'
            >>> str(ComplexNumber(re=-4, im=0).sqrt())
            '0.0+2.0i'
        """
        a = float(self.re)
        b = float(self.im)
        t = math.sqrt((math.hypot(a, b) + abs(a)) / 2.0)

        if t == 0.0:
            # z == 0: знак нулевой мнимой части сохраняется
            root_re, root_im = 0.0, b
        elif a >= 0.0:
            root_re, root_im = t, b / (2.0 * t)
        else:
            root_re, root_im = abs(b) / (2.0 * t), math.copysign(t, b)

        root = ComplexNumber(re=root_re, im=root_im)
        logger.debug("sqrt(%s) = %s", self, root)
        return root

    def __str__(self) -> str:
        sign = "-" if math.copysign(1.0, self.im) < 0 else "+"
        return f"{self.re}{sign}{abs(self.im)}i"
