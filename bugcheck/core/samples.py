"""
Sample programs with deliberate bugs, one per language with a template.
"""

from .base_analyzer import Language

SAMPLES = {
    Language.JAVASCRIPT: """// JavaScript Example with Bugs
function calculateTotal(items) {
    let total = 0
    for (let i = 0; i <= items.length; i++) {
        total += items[i].price
    }
    return total
}

const unused = 42;

if (true) {
    console.log("Always executes");
    return;
    console.log("Never reaches here");
}

while (true) {
    // Potential infinite loop
    break;
}""",
    Language.PYTHON: """# Python Example with Bugs
def calculate_average(numbers):
    total = 0
    for i in range(len(numbers)+1):
        total += numbers[i]
    return total / len(numbers)

unused_var = 100

if True:
    print("Always executes")
    return
    print("Unreachable code")

while True:
    # Infinite loop
    pass""",
    Language.JAVA: """// Java Example with Bugs
public class Calculator {
    public static int sum(int[] numbers) {
        int total = 0
        for (int i = 0; i <= numbers.length; i++) {
            total += numbers[i]
        }
        return total
    }

    public static void main(String[] args) {
        int unused = 42;
        if (true) {
            return;
            System.out.println("Unreachable");
        }
    }
}""",
}


def get_sample(language: "str | Language | None") -> str:
    """Sample program for a language; JavaScript when there is no template."""
    resolved = Language.resolve(language)
    return SAMPLES.get(resolved, SAMPLES[Language.JAVASCRIPT])
