"""
Prompt templates for document analysis.
"""
from langchain_core.prompts import PromptTemplate

KEYWORD_EXCERPT_CHARS = 2000
INSIGHT_EXCERPT_CHARS = 2500
QUESTION_EXCERPT_CHARS = 1500
ABSTRACT_EXCERPT_CHARS = 2000
SUMMARY_EXCERPT_CHARS = 3000

KEYWORD_PROMPT = PromptTemplate.from_template(
    """Analyze the following document and extract:
1. Keywords (10-15 most important terms)
2. Named entities (people, places, organizations)
3. Main topics (5-7 high-level themes)
4. Key concepts (important ideas or principles)

Format your response as JSON with the following structure:
{{
  "keywords": ["keyword1", "keyword2", ...],
  "entities": ["entity1", "entity2", ...],
  "topics": ["topic1", "topic2", ...],
  "concepts": ["concept1", "concept2", ...]
}}

Document content:
{content}..."""
)

INSIGHT_PROMPT = PromptTemplate.from_template(
    """Perform a comprehensive analysis of the following document and provide insights on:

1. Sentiment analysis (positive/negative/neutral)
2. Main topics covered
3. Complexity level (low/medium/high)
4. Readability score (1-100, where 100 is most readable)
5. Key insights (3-5 important takeaways)
6. Recommendations (3-5 actionable suggestions based on the content)

Format your response as JSON:
{{
  "sentiment": "positive|negative|neutral",
  "topics": ["topic1", "topic2", ...],
  "complexity": "low|medium|high",
  "readabilityScore": 75,
  "keyInsights": ["insight1", "insight2", ...],
  "recommendations": ["recommendation1", "recommendation2", ...]
}}

Document content:
{content}..."""
)

QUESTION_PROMPT = PromptTemplate.from_template(
    """Based on the following document content, generate 5-10 thoughtful questions that would help someone understand and engage with the material. Include:
- Comprehension questions
- Analysis questions
- Application questions
- Critical thinking questions

Format as a simple list:
1. Question 1
2. Question 2
...

Document content:
{content}..."""
)

SUMMARY_PROMPT = PromptTemplate.from_template(
    """Please provide a comprehensive summary of the following document with these specifications:
- Maximum length: {max_length} words
- Style: {style_instruction}
- Focus on: {focus}

After the summary, provide:
1. Key points (as a numbered list)
2. Overall confidence level (1-10)

Document content:
{content}

Summary:"""
)

ABSTRACT_PROMPT = PromptTemplate.from_template(
    """Generate a concise academic abstract for the following document. The abstract should be 100-200 words and include:
1. Purpose/objective
2. Main findings or key points
3. Conclusions or implications

Document content:
{content}...

Abstract:"""
)

STYLE_INSTRUCTIONS = {
    "bullet-points": "Format the summary as clear bullet points",
    "paragraph": "Write the summary in well-structured paragraphs",
    "executive": "Write in executive summary style with clear headings",
}
