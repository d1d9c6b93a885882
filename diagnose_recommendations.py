from db import get_db
from recommendation.logic import RecommendationEngine
from recommendation.presenter import explain, PERSONALITY_TYPES


def diagnose_recommendations():
    print("Testing college recommendations\n")
    print("=" * 60)

    with get_db() as db:
        engine = RecommendationEngine(db)

        for mbti in PERSONALITY_TYPES:
            print(f"\nPersonality type: {mbti}")
            print("-" * 60)

            result = engine.compute_recommendation(mbti)
            print(f"Total data points: {result.total_data_points}")
            print(f"Has enough data: {'yes' if result.has_enough_data else 'no'}")

            if not result.recommended:
                print("  Not enough data for recommendations")
                if result.total_data_points > 0:
                    print(f"  Found {result.total_data_points} response(s), "
                          f"but need >= {engine.config.min_responses} per college")
                continue

            best = result.recommended
            print(f"\nRECOMMENDED: {best.college}")
            print(f"  Fit Rate: {best.fit_rate:.1f}%")
            print(f"  Switch Rate: {best.switch_rate:.1f}%")
            print(f"  Score: {best.score:.2f}")
            print(f"  Responses: {best.total_responses}")
            print(f"\n  {explain(best, mbti)}")

            if result.alternatives:
                print("\n  Alternatives:")
                for index, alt in enumerate(result.alternatives, start=1):
                    print(f"  {index}. {alt.college}")
                    print(f"     Fit: {alt.fit_rate:.1f}%, Switch: {alt.switch_rate:.1f}%, Score: {alt.score:.2f}")

    print("\n" + "=" * 60)
    print("Done")


if __name__ == "__main__":
    diagnose_recommendations()
