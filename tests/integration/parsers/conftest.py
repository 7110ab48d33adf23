import pytest

from report_kit.parsers.markdown_parser import MarkdownReportParser
from report_kit.parsers.models import ParsedReport

# Shaped like the deduction-expectation reports the analysis service returns.
DEDUCTION_REPORT = """# 연말정산 공제 예상 리포트

**분석 기준일**: 2025년 1월

## 1. 요약
총 급여 대비 공제 가능 항목을 분석했습니다.

### 주요 공제 항목
- **의료비** 세액공제: 본인 및 부양가족 의료비
- **교육비** 세액공제
* 기부금 세액공제
-

| 항목 | 지출액 | 예상 공제액 |
|------|--------|-------------|
| 의료비 | 3,200,000원 | **480,000원** |
| 교육비 | 1,500,000원 | 225,000원 |

---

#### 참고 사항
공제 한도는 **소득 수준**에 따라 달라질 수 있습니다. 세무 전문가와 상담하세요 **
"""


@pytest.fixture(scope="module")
def parsed_deduction() -> ParsedReport:
    """Parse the sample report once, reuse across tests."""
    return MarkdownReportParser().parse(DEDUCTION_REPORT)


@pytest.fixture
def deduction_report_text() -> str:
    return DEDUCTION_REPORT
