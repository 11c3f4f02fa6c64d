"""Chain of responsibility: store staff passing a request along until someone can help."""

from __future__ import annotations


class StaffHandler:
    """A member of staff for one department, with an optional successor."""

    def __init__(self, department: str, successor: StaffHandler | None = None) -> None:
        self.department = department
        self.successor = successor

    def handle_request(self, request_type: str, details: str) -> StaffHandler | None:
        """Handle ``department:action`` requests or pass them on.

        Returns the handler that dealt with the request, or None if nobody could.
        """
        requested = request_type.partition(":")[0]
        if requested == self.department:
            self.process_request(details)
            return self
        if self.successor is not None:
            print(f"{self.department} staff: Not my department, passing along...")
            return self.successor.handle_request(request_type, details)
        print(f"Sorry, no staff member available to help with: {request_type}")
        return None

    def process_request(self, details: str) -> None:
        print(f"{self.department} staff: I can help with that!")


def _banner(title: str, lines: list[str], rule: str) -> None:
    print(f"\n=== {title} ===")
    for line in lines:
        print(line)
    print(rule + "\n")


class ElectronicsStaff(StaffHandler):
    def __init__(self, successor: StaffHandler | None = None) -> None:
        super().__init__("electronics", successor)

    def process_request(self, details: str) -> None:
        _banner(
            "ELECTRONICS DEPARTMENT",
            [
                f"Electronics specialist: I'll help you with {details}",
                "Let me show you our latest gadgets and tech!",
            ],
            "==============================",
        )


class ClothingStaff(StaffHandler):
    def __init__(self, successor: StaffHandler | None = None) -> None:
        super().__init__("clothing", successor)

    def process_request(self, details: str) -> None:
        _banner(
            "CLOTHING DEPARTMENT",
            [
                f"Fashion consultant: I'll assist you with {details}",
                "Let me find the perfect outfit for you!",
            ],
            "===========================",
        )


class FoodStaff(StaffHandler):
    def __init__(self, successor: StaffHandler | None = None) -> None:
        super().__init__("food", successor)

    def process_request(self, details: str) -> None:
        _banner(
            "FOOD DEPARTMENT",
            [
                f"Food specialist: I can help with {details}",
                "Let me show you our fresh produce and gourmet items!",
            ],
            "=======================",
        )


class CustomerServiceStaff(StaffHandler):
    def __init__(self, successor: StaffHandler | None = None) -> None:
        super().__init__("service", successor)

    def process_request(self, details: str) -> None:
        _banner(
            "CUSTOMER SERVICE",
            [
                f"Customer service rep: I'll handle {details}",
                "How can I make your shopping experience better?",
            ],
            "========================",
        )


def build_chain() -> StaffHandler:
    """Return the store's chain: electronics, clothing, food, then customer service."""
    return ElectronicsStaff(ClothingStaff(FoodStaff(CustomerServiceStaff())))