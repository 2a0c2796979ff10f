"""Static CRediT catalog -- the 14 role definitions and the governance map.

Source: ANSI/NISO Z39.104-2022.  Definitions are declared in canonical
workflow order; the governance map is keyed alphabetically by credit role,
which is the key order the compact mapping export emits.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from credit_taxonomy.domain.entities.role_definition import CreditRoleDefinition
from credit_taxonomy.domain.value_objects.credit_role import (
    CreditRoleCategory,
    CreditRoleId,
    GovernanceRoleId,
)

_C = CreditRoleId
_G = GovernanceRoleId
_STRUCTURAL = CreditRoleCategory.STRUCTURAL
_OPERATIONAL = CreditRoleCategory.OPERATIONAL
_VALIDATION = CreditRoleCategory.VALIDATION

# ---------------------------------------------------------------------------
# Credit role -> governance role (one-to-one)
# ---------------------------------------------------------------------------
CREDIT_TO_GOVERNANCE_MAP: Mapping[CreditRoleId, GovernanceRoleId] = MappingProxyType({
    _C.CONCEPTUALIZATION: _G.ARCHITECTURE,
    _C.DATA_CURATION: _G.DATA_GOVERNANCE,
    _C.FORMAL_ANALYSIS: _G.ANALYSIS,
    _C.FUNDING_ACQUISITION: _G.RESOURCE_ALLOCATION,
    _C.INVESTIGATION: _G.DATA_COLLECTION,
    _C.METHODOLOGY: _G.METHOD_DESIGN,
    _C.PROJECT_ADMINISTRATION: _G.EXECUTION_ORCHESTRATION,
    _C.RESOURCES: _G.RESOURCE_PROVIDER,
    _C.SOFTWARE: _G.SOFTWARE_ENGINEERING,
    _C.SUPERVISION: _G.SUPERVISION,
    _C.VALIDATION: _G.VALIDATION,
    _C.VISUALIZATION: _G.VISUALIZATION,
    _C.WRITING_ORIGINAL_DRAFT: _G.AUTHORING_DRAFT,
    _C.WRITING_REVIEW_EDITING: _G.AUTHORING_REVIEW,
})

# ---------------------------------------------------------------------------
# Complete role definitions
# ---------------------------------------------------------------------------
CREDIT_ROLE_DEFINITIONS: tuple[CreditRoleDefinition, ...] = (
    CreditRoleDefinition(
        id=_C.CONCEPTUALIZATION,
        name="Conceptualization",
        name_zh="概念化",
        description="Ideas; formulation or evolution of overarching research goals and aims.",
        description_zh="構思；制定或發展整體研究目標和目的。",
        category=_STRUCTURAL,
        governance_role=_G.ARCHITECTURE,
        depends_on=(),
        workflow_order=1,
    ),
    CreditRoleDefinition(
        id=_C.METHODOLOGY,
        name="Methodology",
        name_zh="方法論",
        description="Development or design of methodology; creation of models.",
        description_zh="方法論的發展或設計；模型的創建。",
        category=_STRUCTURAL,
        governance_role=_G.METHOD_DESIGN,
        depends_on=(_C.CONCEPTUALIZATION,),
        workflow_order=2,
    ),
    CreditRoleDefinition(
        id=_C.FUNDING_ACQUISITION,
        name="Funding Acquisition",
        name_zh="資金籌集",
        description=(
            "Acquisition of the financial support for the project leading to "
            "this publication."
        ),
        description_zh="為促成本次出版的計畫籌集資金。",
        category=_STRUCTURAL,
        governance_role=_G.RESOURCE_ALLOCATION,
        depends_on=(_C.CONCEPTUALIZATION,),
        workflow_order=3,
    ),
    CreditRoleDefinition(
        id=_C.PROJECT_ADMINISTRATION,
        name="Project Administration",
        name_zh="專案管理",
        description=(
            "Management and coordination responsibility for the research "
            "activity planning and execution."
        ),
        description_zh="負責研究活動規劃和執行的管理和協調。",
        category=_STRUCTURAL,
        governance_role=_G.EXECUTION_ORCHESTRATION,
        depends_on=(_C.CONCEPTUALIZATION, _C.METHODOLOGY),
        workflow_order=4,
    ),
    CreditRoleDefinition(
        id=_C.RESOURCES,
        name="Resources",
        name_zh="資源",
        description=(
            "Provision of study materials, reagents, materials, patients, "
            "laboratory samples, animals, instrumentation, computing "
            "resources, or other analysis tools."
        ),
        description_zh="提供學習材料、試劑、材料、病人、實驗室樣本、動物、儀器、計算資源或其他分析工具。",
        category=_OPERATIONAL,
        governance_role=_G.RESOURCE_PROVIDER,
        depends_on=(_C.FUNDING_ACQUISITION,),
        workflow_order=5,
    ),
    CreditRoleDefinition(
        id=_C.INVESTIGATION,
        name="Investigation",
        name_zh="調查",
        description=(
            "Conducting a research and investigation process, specifically "
            "performing the experiments, or data/evidence collection."
        ),
        description_zh="進行研究和調查過程，具體而言，就是進行實驗或數據/證據收集。",
        category=_OPERATIONAL,
        governance_role=_G.DATA_COLLECTION,
        depends_on=(_C.METHODOLOGY, _C.RESOURCES),
        workflow_order=6,
    ),
    CreditRoleDefinition(
        id=_C.DATA_CURATION,
        name="Data Curation",
        name_zh="資料整理",
        description=(
            "Management activities to annotate (produce metadata), scrub data "
            "and maintain research data for initial use and later reuse."
        ),
        description_zh="管理活動包括註釋（產生元資料）、清理資料以及維護研究資料，以供初始使用和後續重複使用。",
        category=_OPERATIONAL,
        governance_role=_G.DATA_GOVERNANCE,
        depends_on=(_C.INVESTIGATION,),
        workflow_order=7,
    ),
    CreditRoleDefinition(
        id=_C.FORMAL_ANALYSIS,
        name="Formal Analysis",
        name_zh="形式分析",
        description=(
            "Application of statistical, mathematical, computational, or other "
            "formal techniques to analyse or synthesize study data."
        ),
        description_zh="運用統計學、數學、計算或其他正式技術來分析或綜合研究資料。",
        category=_OPERATIONAL,
        governance_role=_G.ANALYSIS,
        depends_on=(_C.DATA_CURATION,),
        workflow_order=8,
    ),
    CreditRoleDefinition(
        id=_C.SOFTWARE,
        name="Software",
        name_zh="軟體",
        description=(
            "Programming, software development; designing computer programs; "
            "implementation of the computer code and supporting algorithms; "
            "testing of existing code components."
        ),
        description_zh="程式設計、軟體開發；設計電腦程式；實作電腦程式碼和支援演算法；測試現有程式碼組件。",
        category=_OPERATIONAL,
        governance_role=_G.SOFTWARE_ENGINEERING,
        depends_on=(_C.METHODOLOGY,),
        workflow_order=9,
    ),
    CreditRoleDefinition(
        id=_C.VISUALIZATION,
        name="Visualization",
        name_zh="視覺化",
        description=(
            "Preparation, creation and/or presentation of the published work, "
            "specifically visualization/data presentation."
        ),
        description_zh="準備、創作和/或展示已發表的作品，特別是視覺化/資料展示。",
        category=_OPERATIONAL,
        governance_role=_G.VISUALIZATION,
        depends_on=(_C.FORMAL_ANALYSIS,),
        workflow_order=10,
    ),
    CreditRoleDefinition(
        id=_C.VALIDATION,
        name="Validation",
        name_zh="驗證",
        description=(
            "Verification, whether as a part of the activity or separate, of "
            "the overall replication/reproducibility of results/experiments "
            "and other research outputs."
        ),
        description_zh="驗證（無論是作為活動的一部分還是單獨進行）結果/實驗和其他研究成果的整體可重複性/可再現性。",
        category=_VALIDATION,
        governance_role=_G.VALIDATION,
        depends_on=(_C.FORMAL_ANALYSIS, _C.SOFTWARE),
        workflow_order=11,
    ),
    CreditRoleDefinition(
        id=_C.WRITING_ORIGINAL_DRAFT,
        name="Writing – Original Draft",
        name_zh="寫作 - 初稿",
        description=(
            "Preparation, creation and/or presentation of the published work, "
            "specifically writing the initial draft (including substantive "
            "translation)."
        ),
        description_zh="準備、創作和/或展示已出版的作品，特別是撰寫初稿（包括實質翻譯）。",
        category=_OPERATIONAL,
        governance_role=_G.AUTHORING_DRAFT,
        depends_on=(_C.FORMAL_ANALYSIS, _C.VISUALIZATION),
        workflow_order=12,
    ),
    CreditRoleDefinition(
        id=_C.WRITING_REVIEW_EDITING,
        name="Writing – Review & Editing",
        name_zh="寫作 - 審閱與編輯",
        description=(
            "Preparation, creation and/or presentation of the published work "
            "by those from the original research group, specifically critical "
            "review, commentary or revision."
        ),
        description_zh="由原研究小組的成員準備、創作和/或展示已發表的作品，特別是批判性審查、評論或修訂。",
        category=_OPERATIONAL,
        governance_role=_G.AUTHORING_REVIEW,
        depends_on=(_C.WRITING_ORIGINAL_DRAFT,),
        workflow_order=13,
    ),
    CreditRoleDefinition(
        id=_C.SUPERVISION,
        name="Supervision",
        name_zh="監督",
        description=(
            "Oversight and leadership responsibility for the research activity "
            "planning and execution, including mentorship external to the "
            "core team."
        ),
        description_zh="負責研究活動規劃和執行的監督和領導工作，包括對核心團隊外部人員的指導。",
        category=_VALIDATION,
        governance_role=_G.SUPERVISION,
        depends_on=(_C.VALIDATION,),
        workflow_order=14,
    ),
)

__all__ = ["CREDIT_ROLE_DEFINITIONS", "CREDIT_TO_GOVERNANCE_MAP"]
