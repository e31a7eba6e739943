PRIME_PROMPT_TEMPLATE = """You are solving a mathematical problem that requires a one-word answer.

TASK: Determine if {number} is a prime number.

DEFINITION: A prime number is a natural number greater than 1 that is not a product of two smaller natural numbers.

REQUIREMENTS:
- Answer with ONLY the word "yes" or "no"
- "yes" if {number} is prime
- "no" if {number} is not prime
- Do not include explanations, periods, or any other text

Output:"""


def build_prime_prompt(number: int) -> str:
    return PRIME_PROMPT_TEMPLATE.format(number=number)
