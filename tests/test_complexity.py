"""
Tests for cyclomatic complexity.
"""

from fnloc.analysis.complexity import calculate_cyclomatic_complexity
from fnloc.parsing import syntax as ast


class TestComplexityFromSource:
    """Complexity of parsed Rust functions."""

    def test_simple_function(self, parse_function):
        """Straight-line code has complexity 1."""
        func = parse_function("""
fn simple() {
    println!("Hello, world!");
}
""")
        assert calculate_cyclomatic_complexity(func) == 1

    def test_if(self, parse_function):
        func = parse_function("""
fn with_if(x: i32) {
    if x > 0 {
        println!("positive");
    }
}
""")
        assert calculate_cyclomatic_complexity(func) == 2

    def test_else_adds_nothing(self, parse_function):
        """An else branch is not a decision of its own."""
        func = parse_function("""
fn with_if_else(x: i32) {
    if x > 0 {
        println!("positive");
    } else {
        println!("not positive");
    }
}
""")
        assert calculate_cyclomatic_complexity(func) == 2

    def test_match_counts_each_arm(self, parse_function):
        """Base 1 + match 1 + 2 arms."""
        func = parse_function("""
fn with_match(x: Option<i32>) {
    match x {
        Some(val) => println!("Got: {}", val),
        None => println!("Got nothing"),
    }
}
""")
        assert calculate_cyclomatic_complexity(func) == 4

    def test_loops(self, parse_function):
        """Base 1 + while + for + loop + break."""
        func = parse_function("""
fn with_loops() {
    while true {
        println!("loop");
    }

    for i in 0..10 {
        println!("{}", i);
    }

    loop {
        break;
    }
}
""")
        assert calculate_cyclomatic_complexity(func) == 5

    def test_logical_operators(self, parse_function):
        """Each short-circuit operator is a decision."""
        func = parse_function("""
fn with_logical_ops(a: bool, b: bool, c: bool) {
    if a && b || c {
        println!("complex condition");
    }
}
""")
        assert calculate_cyclomatic_complexity(func) == 4

    def test_arithmetic_operators_add_nothing(self, parse_function):
        func = parse_function("""
fn arithmetic(a: i32, b: i32) -> i32 {
    let mut c = a * b + 1;
    c += a - b;
    c
}
""")
        assert calculate_cyclomatic_complexity(func) == 1

    def test_try_operator(self, parse_function):
        func = parse_function("""
fn with_try() -> Result<i32, &'static str> {
    let result = some_function()?;
    Ok(result)
}
""")
        assert calculate_cyclomatic_complexity(func) == 2

    def test_early_return(self, parse_function):
        """Base 1 + if + return."""
        func = parse_function("""
fn with_early_return(x: i32) -> i32 {
    if x < 0 {
        return 0;
    }
    x * 2
}
""")
        assert calculate_cyclomatic_complexity(func) == 3

    def test_continue(self, parse_function):
        func = parse_function("""
fn skip_odd(values: &[i32]) {
    for v in values {
        if v % 2 == 1 {
            continue;
        }
    }
}
""")
        assert calculate_cyclomatic_complexity(func) == 4

    def test_nested_conditions(self, parse_function):
        func = parse_function("""
fn nested_conditions(x: i32, y: i32) {
    if x > 0 {
        if y > 0 {
            println!("both positive");
        } else {
            println!("x positive, y not");
        }
    } else {
        println!("x not positive");
    }
}
""")
        assert calculate_cyclomatic_complexity(func) == 3

    def test_else_if_chain(self, parse_function):
        """Every ``else if`` is another condition."""
        func = parse_function("""
fn sign(x: i32) -> i32 {
    if x > 0 {
        1
    } else if x < 0 {
        -1
    } else {
        0
    }
}
""")
        assert calculate_cyclomatic_complexity(func) == 3

    def test_match_with_guards(self, parse_function):
        """Guards do not add beyond their arm."""
        func = parse_function("""
fn complex_match(x: Option<i32>) {
    match x {
        Some(val) if val > 0 => println!("positive: {}", val),
        Some(val) if val < 0 => println!("negative: {}", val),
        Some(0) => println!("zero"),
        None => println!("none"),
    }
}
""")
        assert calculate_cyclomatic_complexity(func) == 6

    def test_guard_with_logical_operator(self, parse_function):
        func = parse_function("""
fn guarded(x: Option<i32>) -> bool {
    match x {
        Some(v) if v > 0 && v < 10 => true,
        _ => false,
    }
}
""")
        # 1 + match 1 + 2 arms + && 1
        assert calculate_cyclomatic_complexity(func) == 5

    def test_closure_boundary_adds_nothing(self, parse_function):
        func = parse_function("""
fn with_closure() {
    let f = |x: bool| if x { 1 } else { 2 };
}
""")
        assert calculate_cyclomatic_complexity(func) == 2

    def test_decisions_inside_call_arguments(self, parse_function):
        func = parse_function("""
fn args(a: bool, b: bool) {
    consume(a && b, vec.get(0)?);
}
""")
        assert calculate_cyclomatic_complexity(func) == 3

    def test_unsafe_block_is_walked(self, parse_function):
        func = parse_function("""
fn raw(p: *const i32) -> i32 {
    unsafe {
        if p.is_null() {
            return 0;
        }
        *p
    }
}
""")
        assert calculate_cyclomatic_complexity(func) == 3

    def test_macro_bodies_are_opaque(self, parse_function):
        func = parse_function("""
fn checks(x: i32) {
    assert!(x > 0 && x < 10);
    let v = vec![if x > 1 { 1 } else { 2 }];
}
""")
        assert calculate_cyclomatic_complexity(func) == 1

    def test_nested_function_is_not_folded_in(self, parse_function):
        """A nested fn is measured on its own."""
        func = parse_function("""
fn outer(x: i32) -> i32 {
    fn helper(y: i32) -> i32 {
        if y > 0 && y < 5 {
            return y;
        }
        0
    }
    helper(x)
}
""")
        assert calculate_cyclomatic_complexity(func) == 1

    def test_accepts_body_or_function(self, parse_function):
        func = parse_function("""
fn with_if(x: i32) {
    if x > 0 {}
}
""")
        assert calculate_cyclomatic_complexity(func) == calculate_cyclomatic_complexity(func.body) == 2


class TestComplexityFromSyntax:
    """Complexity of hand-built bodies."""

    def test_empty_body(self):
        assert calculate_cyclomatic_complexity(ast.Block()) == 1

    def test_unknown_expressions_contribute_nothing(self):
        body = ast.Block((ast.ExprStmt(ast.Other("yield_expression")), ast.MacroStmt("todo")))
        assert calculate_cyclomatic_complexity(body) == 1

    def test_item_statement_contributes_nothing(self):
        body = ast.Block((ast.ItemStmt("function_item", "inner"),))
        assert calculate_cyclomatic_complexity(body) == 1

    def test_match_without_arms(self):
        body = ast.Block((ast.ExprStmt(ast.Match(ast.Other("identifier"), ())),))
        assert calculate_cyclomatic_complexity(body) == 2

    def test_return_value_is_walked(self):
        ret = ast.Return(ast.Binary("||", ast.Other(), ast.Other()))
        body = ast.Block((ast.ExprStmt(ret),))
        assert calculate_cyclomatic_complexity(body) == 3

    def test_let_without_initializer(self):
        body = ast.Block((ast.Local(),))
        assert calculate_cyclomatic_complexity(body) == 1

    def test_idempotent(self):
        cond = ast.Binary("&&", ast.Other(), ast.Other())
        inner = ast.If(cond, ast.Block((ast.ExprStmt(ast.Continue()),)), None)
        body = ast.Block((ast.ExprStmt(ast.ForLoop(ast.Other(), ast.Block((ast.ExprStmt(inner),)))),))
        first = calculate_cyclomatic_complexity(body)
        assert first == calculate_cyclomatic_complexity(body)
        # 1 + for + if + && + continue
        assert first == 5
