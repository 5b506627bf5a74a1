from notion_blocks import HEADING_MARKER, LIST_MARKER

SECTION_TITLES = [
    "질문 요지",
    "답변 내용",
    "핵심 개념",
    "확인 필요 사항",
]

REFORMAT_PROMPT = """
[지시]
당신은 제공된 정보를 가공하는 사실 기반 어시스턴트입니다. 아래 규칙에 따라 [원본 답변]을 재구성하세요.

[규칙]
1.  **진실성:** 절대 정보를 지어내거나, 추측하거나, 내용을 변경하지 마세요. 원본에 있는 사실만 사용하세요.
2.  **완전성:** 원본의 어떤 정보도 생략하지 마세요.
3.  **형식:**
    - 각 섹션의 제목은 `{heading}제목` 형식으로 시작해야 합니다.
    - 목록은 `{item}항목` 형식으로 만드세요.
    - 이외의 모든 내용은 일반 문단으로 작성하세요.

[재구성할 섹션]
{sections}

---
[원본 질문]:
{question}

[원본 답변]:
{answer}
"""


def build_prompt(question, answer):
    sections = "\n".join(
        f"{LIST_MARKER}{HEADING_MARKER}{title}" for title in SECTION_TITLES
    )
    return REFORMAT_PROMPT.format(
        heading=HEADING_MARKER,
        item=LIST_MARKER,
        sections=sections,
        question=question,
        answer=answer,
    ).strip()
