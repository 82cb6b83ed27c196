"""Registry of built-in forms for the artlang evaluator.

Maps head symbol names to handlers. Each handler receives the unevaluated
tail of the list, the current Environment and the evaluator, and decides its
own evaluation order, arity and short-circuiting.
"""

from artlang.evaluation.builtins.arithmetic_forms import add_form, subtract_form, multiply_form, divide_form
from artlang.evaluation.builtins.comparison_forms import (
    greater_than_form,
    greater_equal_form,
    less_than_form,
    less_equal_form,
    equal_form,
)
from artlang.evaluation.builtins.if_form import if_form
from artlang.evaluation.builtins.let_form import let_form
from artlang.evaluation.builtins.set_form import set_form
from artlang.evaluation.builtins.while_form import while_form
from artlang.evaluation.builtins.drawing_forms import (
    rgb_form,
    stroke_form,
    fill_form,
    no_stroke_form,
    no_fill_form,
    rect_form,
    line_form,
    circle_form,
)

BUILTINS = {
    "+": add_form,
    "-": subtract_form,
    "*": multiply_form,
    "/": divide_form,
    ">": greater_than_form,
    ">=": greater_equal_form,
    "<": less_than_form,
    "<=": less_equal_form,
    "=": equal_form,
    "if": if_form,
    "let": let_form,
    "set": set_form,
    "while": while_form,
    "rgb": rgb_form,
    "stroke": stroke_form,
    "fill": fill_form,
    "noStroke": no_stroke_form,
    "noFill": no_fill_form,
    "rect": rect_form,
    "line": line_form,
    "circle": circle_form,
}

# Reserved names with no implementation; user-defined functions are not supported.
RESERVED = frozenset({"define", "defun", "lambda"})

SIGNATURES = {
    "+": "(+ number...)",
    "-": "(- number...)",
    "*": "(* number...)",
    "/": "(/ number number...)",
    ">": "(> number number...)",
    ">=": "(>= number number...)",
    "<": "(< number number...)",
    "<=": "(<= number number...)",
    "=": "(= value value...)",
    "if": "(if condition true_expr false_expr)",
    "let": "(let ((symbol expr)...) body...)",
    "set": "(set symbol expr)",
    "while": "(while condition body...)",
    "rgb": "(rgb r g b)",
    "stroke": "(stroke color)",
    "fill": "(fill color)",
    "noStroke": "(noStroke)",
    "noFill": "(noFill)",
    "rect": "(rect x y width height)",
    "line": "(line x1 y1 x2 y2)",
    "circle": "(circle x y radius)",
}
