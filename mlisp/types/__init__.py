from mlisp.types.value import Value, EPSILON
from mlisp.types.symbol import Symbol
from mlisp.types.nil import Nil, NilType
from mlisp.types.boolean import Boolean, TRUE, FALSE
from mlisp.types.numeric import Numeric, Integer, Float, Rational, from_python
from mlisp.types.sequence import Sequence, List, Vector, HashMap
from mlisp.types.linalg import NumericVector, Matrix
from mlisp.types.environment import Environment
from mlisp.types.function import Function, NativeFunction, Closure

__all__ = [
    "Value", "EPSILON", "Symbol", "Nil", "NilType", "Boolean", "TRUE", "FALSE",
    "Numeric", "Integer", "Float", "Rational", "from_python",
    "Sequence", "List", "Vector", "HashMap", "NumericVector", "Matrix",
    "Environment", "Function", "NativeFunction", "Closure",
]
