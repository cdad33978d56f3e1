"""
Seed the default VC readiness questionnaire.
Creates tables if needed; categories, template and questions are only
inserted into an empty database.
"""
from sqlalchemy.orm import Session
from database import Base, create_db_engine, create_session_factory
from models import AssessmentCategory, AssessmentTemplate, Question, QuestionType

# Most questions reward the top two answers disproportionately
STANDARD_POINTS = [0, 1, 2, 4, 5]
LINEAR_POINTS = [1, 2, 3, 4, 5]
QUESTION_WEIGHT = 5

CATEGORIES = [
    ("Market & Opportunity", "Market size, growth, and competitive landscape", 25),
    ("Team & Leadership", "Founder experience and team strength", 20),
    ("Product & Technology", "Product development and technical differentiation", 20),
    ("Traction & Business Model", "Customer traction and revenue model", 20),
    ("Financial Readiness", "Financial planning and funding requirements", 15),
]

QUESTIONS = {
    "Market & Opportunity": [
        ("What is the total addressable market (TAM) for your solution?",
         "Consider the total market demand for your product or service",
         ["Under $100M", "$100M - $500M", "$500M - $1B", "$1B - $10B", "Over $10B"],
         STANDARD_POINTS),
        ("What is the annual growth rate of your target market?",
         "Market growth indicates opportunity and timing",
         ["Declining market", "Flat (0-2% growth)", "Growing (3-10% annually)",
          "Fast growth (11-25% annually)", "Explosive growth (>25% annually)"],
         STANDARD_POINTS),
        ("How well have you validated the problem you're solving?",
         "Problem validation is crucial for product-market fit",
         ["No validation yet", "Based on assumptions only", "Some market research conducted",
          "Extensive customer interviews", "Customers paying for solution"],
         STANDARD_POINTS),
        ("What is your competitive advantage?",
         "Sustainable competitive advantages create defensible businesses",
         ["No clear advantage", "Minor feature differences", "Some differentiation",
          "Strong competitive moat", "Unique IP or breakthrough technology"],
         STANDARD_POINTS),
        ("How developed is your go-to-market strategy?",
         "Clear path to customers is essential for scaling",
         ["No strategy defined", "Basic plan outlined", "Defined channels and tactics",
          "Proven channels with metrics", "Scalable, repeatable system"],
         STANDARD_POINTS),
    ],
    "Team & Leadership": [
        ("What is your experience as a founder?",
         "Founder experience significantly impacts success probability",
         ["First-time founder, no relevant experience", "Some entrepreneurial experience",
          "Relevant industry experience", "Previous successful exit",
          "Serial entrepreneur with multiple exits"],
         LINEAR_POINTS),
        ("How complete is your founding team?",
         "Strong teams with complementary skills perform better",
         ["Solo founder", "2 co-founders", "Core team (3-4 people)",
          "Full team across key functions", "Complete team plus advisors"],
         LINEAR_POINTS),
        ("What is your team's domain expertise?",
         "Deep industry knowledge provides significant advantages",
         ["Learning the industry", "Basic industry knowledge", "Good understanding of market",
          "Deep industry expertise", "Recognized industry leaders"],
         LINEAR_POINTS),
        ("How strong is your advisory board?",
         "Quality advisors provide guidance, credibility, and connections",
         ["No advisors", "Friends and family advisors", "Some relevant advisors",
          "Strong industry advisors", "Top-tier advisors and mentors"],
         STANDARD_POINTS),
    ],
    "Product & Technology": [
        ("What stage is your product development?",
         "Product maturity affects risk and time to market",
         ["Idea stage only", "Working prototype", "Minimum viable product (MVP)",
          "Beta product with users", "Market-ready product"],
         STANDARD_POINTS),
        ("How technically differentiated is your solution?",
         "Technical innovation can create sustainable advantages",
         ["No technical differentiation", "Minor technical improvements", "Notable technical features",
          "Significant technical innovation", "Breakthrough technology"],
         STANDARD_POINTS),
        ("What intellectual property do you have?",
         "IP protection can provide competitive moats",
         ["No intellectual property", "Trade secrets and know-how", "Pending patent applications",
          "Granted patents", "Strong IP portfolio"],
         STANDARD_POINTS),
        ("How scalable is your technology platform?",
         "Scalability is crucial for venture-scale returns",
         ["Mostly manual processes", "Some automation in place", "Mostly automated and scalable",
          "Highly scalable architecture", "Infinitely scalable platform"],
         STANDARD_POINTS),
    ],
    "Traction & Business Model": [
        ("How clear is your revenue model?",
         "Clear path to monetization is essential",
         ["No revenue model defined", "Unclear or unproven model", "Defined revenue model",
          "Proven revenue model", "Multiple revenue streams"],
         STANDARD_POINTS),
        ("What customer traction do you have?",
         "Customer validation reduces market risk",
         ["No customers yet", "Letters of intent or interest", "Pilot customers",
          "Paying customers", "Growing customer base"],
         STANDARD_POINTS),
        ("What is your current monthly recurring revenue (MRR)?",
         "Revenue growth demonstrates market validation",
         ["No revenue yet", "Under $10K MRR", "$10K - $50K MRR", "$50K - $200K MRR", "Over $200K MRR"],
         STANDARD_POINTS),
        ("How well do you understand your unit economics?",
         "Understanding unit economics is crucial for scaling",
         ["Don't know unit economics", "Unit economics are negative", "Break-even unit economics",
          "Positive unit economics", "Strong margins and LTV/CAC"],
         STANDARD_POINTS),
    ],
    "Financial Readiness": [
        ("How detailed is your financial planning?",
         "Financial planning shows business maturity",
         ["No financial planning", "Basic revenue projections", "Detailed financial forecasts",
          "Scenario planning and modeling", "Sophisticated financial models"],
         STANDARD_POINTS),
        ("How clear are your funding requirements?",
         "Clear funding needs demonstrate strategic thinking",
         ["Unclear funding needs", "Rough funding estimate", "Defined funding amount",
          "Detailed funding breakdown", "Multiple funding scenarios"],
         STANDARD_POINTS),
        ("How specific is your use of funds strategy?",
         "Clear use of funds shows execution capability",
         ["Vague use of funds", "General spending categories", "Specific fund allocation",
          "Detailed milestones and ROI", "ROI projections by category"],
         STANDARD_POINTS),
    ],
}


def build_options(labels, points):
    return [
        {"value": value, "text": label, "points": point}
        for value, (label, point) in enumerate(zip(labels, points))
    ]


def seed_database(db: Session) -> bool:
    """Insert default categories, template and questions. Returns False if data already exists."""
    if db.query(AssessmentCategory).count() > 0:
        print("ℹ️ Categories already present, skipping seed")
        return False

    try:
        for order_index, (name, description, weight) in enumerate(CATEGORIES, start=1):
            category = AssessmentCategory(
                name=name,
                description=description,
                weight=weight,
                order_index=order_index
            )
            db.add(category)
            db.flush()

            for question_index, (text, question_description, labels, points) in enumerate(QUESTIONS[name], start=1):
                db.add(Question(
                    category_id=category.id,
                    text=text,
                    description=question_description,
                    type=QuestionType.MULTIPLE_CHOICE.value,
                    weight=QUESTION_WEIGHT,
                    options=build_options(labels, points),
                    order_index=question_index
                ))

        db.add(AssessmentTemplate(
            name="Default VC Readiness Assessment",
            version="1.0",
            description="Comprehensive assessment for VC funding readiness"
        ))
        db.commit()
    except Exception as e:
        db.rollback()
        print(f"❌ Database seeding failed: {e}")
        raise

    print(f"✅ Seeded {len(CATEGORIES)} categories and {sum(len(q) for q in QUESTIONS.values())} questions")
    return True


if __name__ == "__main__":
    engine = create_db_engine()
    Base.metadata.create_all(bind=engine)
    db = create_session_factory(engine)()
    try:
        seed_database(db)
    finally:
        db.close()
        engine.dispose()
