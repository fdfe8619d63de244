from sqlalchemy.orm import Session
from typing import List, Optional

from app.models.resume import ResumeAnalysis
from app.schemas.content import ResumeAnalysisCreate
from app.schemas.generated import ResumeAnalysisResult


def get_analyses(db: Session, skip: int = 0, limit: int = 100, user_id: Optional[int] = None) -> List[ResumeAnalysis]:
    query = db.query(ResumeAnalysis)
    if user_id is not None:
        query = query.filter(ResumeAnalysis.userId == user_id)
    return query.order_by(ResumeAnalysis.createdAt.desc()).offset(skip).limit(limit).all()


def get_analysis(db: Session, analysis_id: int) -> Optional[ResumeAnalysis]:
    return db.query(ResumeAnalysis).filter(ResumeAnalysis.id == analysis_id).first()


def create_analysis(
    db: Session,
    result: ResumeAnalysisResult,
    file_name: str,
    file_url: str,
    user_id: Optional[int] = None,
) -> ResumeAnalysis:
    """
    Store a model analysis. The nested insight sections are kept together in ``details``.
    """
    record = ResumeAnalysisCreate(
        userId=user_id,
        fileName=file_name,
        fileUrl=file_url,
        atsScore=result.atsScore,
        keywordMatches=result.keywordMatches.model_dump(),
        suggestions=result.suggestions,
        formatScore=result.formatScore,
        readabilityScore=result.readabilityScore,
        analysis=result.analysis,
        details={
            "industryInsights": result.industryInsights.model_dump(),
            "skillsAnalysis": result.skillsAnalysis.model_dump(),
            "experienceAnalysis": result.experienceAnalysis.model_dump(),
            "improvementPriority": result.improvementPriority.model_dump(),
        },
    )
    db_analysis = ResumeAnalysis(**record.model_dump())
    db.add(db_analysis)
    db.commit()
    db.refresh(db_analysis)
    return db_analysis


def delete_analysis(db: Session, analysis_id: int) -> bool:
    db_analysis = get_analysis(db, analysis_id)
    if db_analysis is None:
        return False
    db.delete(db_analysis)
    db.commit()
    return True
