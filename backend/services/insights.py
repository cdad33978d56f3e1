from typing import Dict, List
from services.scoring_types import CategoryScore


MAX_STRENGTHS = 5
MAX_WEAKNESSES = 5
MAX_RECOMMENDATIONS = 8

# Category recommendations keyed by lowercased category name
# "low" applies below 50%, "moderate" from 50% up to 70%
CATEGORY_RECOMMENDATIONS = {
    "market & opportunity": {
        "low": [
            "Conduct thorough market research and validate your target market size",
            "Develop a clear competitive analysis and positioning strategy",
        ],
        "moderate": ["Refine your go-to-market strategy and customer segmentation"],
    },
    "team & leadership": {
        "low": [
            "Consider adding experienced advisors or co-founders to strengthen your team",
            "Highlight relevant industry experience and past achievements",
        ],
        "moderate": ["Consider expanding your advisory board with industry experts"],
    },
    "product & technology": {
        "low": [
            "Focus on product development and achieving key technical milestones",
            "Consider intellectual property protection for your innovations",
        ],
        "moderate": ["Focus on product-market fit and user feedback integration"],
    },
    "traction & business model": {
        "low": [
            "Develop pilot customers and validate your revenue model",
            "Focus on customer acquisition and retention metrics",
        ],
        "moderate": ["Scale your customer acquisition efforts and improve unit economics"],
    },
    "financial readiness": {
        "low": [
            "Create detailed financial projections and funding requirements",
            "Develop a clear use of funds strategy with measurable milestones",
        ],
        "moderate": ["Strengthen your financial planning and scenario modeling"],
    },
}

# (minimum average percentage, opening message, closing message), checked in order
OVERALL_TIERS = [
    (
        70,
        "You have a strong foundation for VC fundraising",
        "Focus on perfecting your pitch and identifying the right investor fit",
    ),
    (
        50,
        "Address key weaknesses before approaching tier-1 VCs",
        "Consider seed-stage investors who can provide strategic guidance",
    ),
    (
        0,
        "Focus on fundamental business development before seeking VC funding",
        "Consider angel investors or grants as interim funding sources",
    ),
]


def format_percentage(percentage: float) -> str:
    """Render 85.5 as "85.5" and 100.0 as "100" """
    return f"{percentage:g}"


def identify_strengths(category_scores: Dict[int, CategoryScore]) -> List[str]:
    """Strengths based on category scores, strongest area first"""
    strengths = []

    for score in category_scores.values():
        if score.percentage >= 80:
            strengths.append(
                f"Strong {score.category_name.lower()} with {format_percentage(score.percentage)}% score"
            )
        elif score.percentage >= 70:
            strengths.append(f"Good {score.category_name.lower()} foundation")

    # sorted() is stable, so ties keep category order
    ranked = sorted(category_scores.values(), key=lambda s: s.percentage, reverse=True)
    if ranked and ranked[0].percentage >= 60:
        strengths.insert(0, f"{ranked[0].category_name} is your strongest area")

    return strengths[:MAX_STRENGTHS]


def identify_weaknesses(category_scores: Dict[int, CategoryScore]) -> List[str]:
    weaknesses = []

    for score in category_scores.values():
        if score.percentage < 40:
            weaknesses.append(
                f"{score.category_name} needs significant improvement ({format_percentage(score.percentage)}%)"
            )
        elif score.percentage < 60:
            weaknesses.append(f"{score.category_name} has room for improvement")

    return weaknesses[:MAX_WEAKNESSES]


def generate_recommendations(category_scores: Dict[int, CategoryScore]) -> List[str]:
    """
    Category-specific recommendations wrapped in an opening and closing message
    chosen from the plain average of category percentages.
    Truncation happens after the closing message is appended, so it may be dropped.
    """
    recommendations = []

    for score in category_scores.values():
        templates = CATEGORY_RECOMMENDATIONS.get(score.category_name.lower())
        if not templates:
            continue
        if score.percentage < 50:
            recommendations.extend(templates["low"])
        elif score.percentage < 70:
            recommendations.extend(templates["moderate"])

    if category_scores:
        average = sum(s.percentage for s in category_scores.values()) / len(category_scores)
        for threshold, opening, closing in OVERALL_TIERS:
            if average >= threshold:
                recommendations.insert(0, opening)
                recommendations.append(closing)
                break

    return recommendations[:MAX_RECOMMENDATIONS]
