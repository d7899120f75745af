from review_assistant.models.config import OutputFormat


REVIEW_PROMPT = """You are an experienced software engineer tasked with reviewing a Pull Request. Your goal is to provide concise, actionable feedback that helps improve code quality while highlighting any critical issues.

Here's the git diff you need to review:

<git_diff>
{diff}
</git_diff>

The programming language used in this diff is:

<language>
{language}
</language>

Instructions:
1. Analyze the git diff carefully.
2. In your analysis, consider the following aspects:
   - Code quality
   - Maintainability
   - Readability
   - Performance
   - Security
   - Potential bugs or vulnerabilities

3. Prioritize your findings, focusing on the most important issues first.
4. Provide concise feedback with specific code suggestions where applicable.
5. Rate each aspect (code quality, maintainability, readability, performance, security) on a scale of 1 to 3 stars.
6. Flag any major bugs or blatant failures prominently.

{output_instructions}

Remember to keep your feedback concise and actionable, focusing on the most important aspects that will improve the code."""


STRUCTURED_OUTPUT = """Output Format:
Use GitHub Markdown format for your response. Structure your review as follows:

1. **Analysis**: Show your thought process and observations inside <code_review_process> tags.
2. **Key Issues**: List the most important issues you've identified, with code suggestions where applicable.
3. **Minor Improvements**: Briefly mention any minor issues or suggestions.
4. **Ratings**: Provide star ratings for each aspect.
5. **Major Flags**: If applicable, prominently flag any critical issues.

Before providing your final output, break down your review process inside <code_review_process> tags:

- Summarize the changes made in the diff
- Identify potential issues in each aspect (code quality, maintainability, readability, performance, security)
- Categorize issues as major or minor
- Suggest improvements for each issue

Example output structure:

<code_review_process>
[Your detailed analysis and observations]
</code_review_process>

## Key Issues
1. [Issue description]
   ```[language]
   [Code suggestion]
   ```

## Minor Improvements
- [Brief suggestion]

## Ratings
- Code Quality: ⭐⭐☆
- Maintainability: ⭐⭐⭐
- Readability: ⭐⭐☆
- Performance: ⭐⭐⭐
- Security: ⭐☆☆

## Major Flags
**⚠️ [Description of critical issue, if any]**"""


FREEFORM_OUTPUT = """Output Format:
Use GitHub Markdown format for your response. Cover the key issues, minor improvements, star ratings and any major flags, in whatever layout reads best."""


OUTPUT_INSTRUCTIONS = {
    OutputFormat.STRUCTURED: STRUCTURED_OUTPUT,
    OutputFormat.FREEFORM: FREEFORM_OUTPUT,
}


def build_review_prompt(
    language: str,
    diff: str,
    output_format: OutputFormat = OutputFormat.STRUCTURED,
) -> str:
    """Build the complete prompt for reviewing a diff or a single hunk."""
    return REVIEW_PROMPT.format(
        diff=diff,
        language=language,
        output_instructions=OUTPUT_INSTRUCTIONS[OutputFormat(output_format)],
    )
